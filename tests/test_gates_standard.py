"""Tests for the gate vocabulary and matrix library."""

from __future__ import annotations

import math

import pytest
import torch

from quantum_sim.core import Complex
from quantum_sim.errors import InvalidGateError, MissingParameterError, UnknownGateError
from quantum_sim.gates import (
    GATES,
    THREE_QUBIT_GATES,
    TWO_QUBIT_GATES,
    GateKind,
    dagger,
    is_unitary,
    phase,
    rx,
    ry,
    rz,
    single_qubit_matrix,
    to_tensor,
)

ANGLES = [0.0, 0.3, math.pi / 4, math.pi / 2, math.pi, -1.7, 2 * math.pi]


def _matrices_close(a, b, atol: float = 1e-12) -> bool:
    return all(x.equals(y, atol) for row_a, row_b in zip(a, b) for x, y in zip(row_a, row_b))


@pytest.mark.parametrize(
    "name,matrix",
    [
        *GATES.items(),
        *TWO_QUBIT_GATES.items(),
        *THREE_QUBIT_GATES.items(),
    ],
)
def test_fixed_matrices_are_unitary(name, matrix) -> None:
    dim = len(matrix)
    assert dim in (2, 4, 8), name
    assert all(len(row) == dim for row in matrix)
    assert is_unitary(matrix), name


@pytest.mark.parametrize("theta", ANGLES)
def test_rotation_matrices_are_unitary(theta: float) -> None:
    for ctor in (rx, ry, rz, phase):
        assert is_unitary(ctor(theta)), (ctor.__name__, theta)


def test_rotation_formulas() -> None:
    theta = 0.8
    c, s = math.cos(theta / 2), math.sin(theta / 2)

    assert _matrices_close(rx(theta), ((Complex(c), Complex(0, -s)), (Complex(0, -s), Complex(c))))
    assert _matrices_close(ry(theta), ((Complex(c), Complex(-s)), (Complex(s), Complex(c))))
    assert _matrices_close(
        rz(theta),
        (
            (Complex.from_polar(1, -theta / 2), Complex.zero()),
            (Complex.zero(), Complex.from_polar(1, theta / 2)),
        ),
    )
    assert _matrices_close(
        phase(theta),
        ((Complex.one(), Complex.zero()), (Complex.zero(), Complex.from_polar(1, theta))),
    )


def test_named_relations() -> None:
    assert _matrices_close(dagger(GATES["S"]), GATES["Sdg"])
    assert _matrices_close(dagger(GATES["T"]), GATES["Tdg"])
    assert _matrices_close(phase(math.pi), GATES["Z"])
    assert _matrices_close(phase(math.pi / 2), GATES["S"])

    t = to_tensor(GATES["T"])
    s = to_tensor(GATES["S"])
    assert torch.allclose(t @ t, s, atol=1e-12)

    sx = to_tensor(GATES["SX"])
    assert torch.allclose(sx @ sx, to_tensor(GATES["X"]), atol=1e-12)

    sqswap = to_tensor(TWO_QUBIT_GATES["SQSWAP"])
    assert torch.allclose(sqswap @ sqswap, to_tensor(TWO_QUBIT_GATES["SWAP"]), atol=1e-12)


def test_multi_qubit_index_convention() -> None:
    cnot = to_tensor(TWO_QUBIT_GATES["CNOT"])
    # Control is the leading qubit: |10> -> |11>.
    assert cnot[3, 2] == 1 and cnot[2, 3] == 1
    assert cnot[0, 0] == 1 and cnot[1, 1] == 1

    toffoli = to_tensor(THREE_QUBIT_GATES["TOFFOLI"])
    assert toffoli[7, 6] == 1 and toffoli[6, 7] == 1
    assert torch.allclose(toffoli[:6, :6], torch.eye(6, dtype=toffoli.dtype))

    fredkin = to_tensor(THREE_QUBIT_GATES["FREDKIN"])
    assert fredkin[6, 5] == 1 and fredkin[5, 6] == 1


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        GATES["H"] = GATES["X"]  # type: ignore[index]
    with pytest.raises(TypeError):
        TWO_QUBIT_GATES["CZ"] = TWO_QUBIT_GATES["SWAP"]  # type: ignore[index]


def test_is_unitary_rejects_non_unitary() -> None:
    scaled = ((Complex(2.0), Complex.zero()), (Complex.zero(), Complex(2.0)))
    assert not is_unitary(scaled)
    assert not is_unitary(torch.ones(2, 3, dtype=torch.complex128))


class TestGateKind:
    def test_arity_and_params(self) -> None:
        assert (GateKind.RX.n_qubits, GateKind.RX.n_params) == (1, 1)
        assert (GateKind.CCX.n_qubits, GateKind.CCX.n_params) == (3, 0)
        assert (GateKind.CZ.n_qubits, GateKind.CZ.n_params) == (2, 0)
        assert GateKind.P.is_parametric
        assert not GateKind.H.is_parametric

    def test_wire_names(self) -> None:
        names = [k.wire_name for k in GateKind]
        assert names == [
            "H", "X", "Y", "Z", "S", "Sdg", "T", "Tdg",
            "Rx", "Ry", "Rz", "P", "CX", "CZ", "SWAP", "CCX", "MEASURE",
        ]

    @pytest.mark.parametrize(
        "name,kind",
        [
            ("h", GateKind.H),
            ("SDG", GateKind.SDG),
            ("rx", GateKind.RX),
            ("CNOT", GateKind.CX),
            ("toffoli", GateKind.CCX),
            ("phase", GateKind.P),
            ("M", GateKind.MEASURE),
        ],
    )
    def test_from_name(self, name: str, kind: GateKind) -> None:
        assert GateKind.from_name(name) is kind

    def test_from_name_unknown(self) -> None:
        with pytest.raises(UnknownGateError, match="Unsupported gate"):
            GateKind.from_name("FOO")
        with pytest.raises(ValueError):
            GateKind.from_name("U3")


class TestSingleQubitMatrix:
    def test_fixed(self) -> None:
        assert single_qubit_matrix(GateKind.H) is GATES["H"]
        assert single_qubit_matrix(GateKind.TDG) is GATES["Tdg"]

    def test_parametric(self) -> None:
        assert _matrices_close(single_qubit_matrix(GateKind.RY, [0.4]), ry(0.4))

    def test_missing_parameter(self) -> None:
        with pytest.raises(MissingParameterError):
            single_qubit_matrix(GateKind.RZ)
        with pytest.raises(MissingParameterError):
            single_qubit_matrix(GateKind.P, [])

    def test_not_single_qubit(self) -> None:
        with pytest.raises(InvalidGateError):
            single_qubit_matrix(GateKind.CX)
