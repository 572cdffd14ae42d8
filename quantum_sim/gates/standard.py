"""Standard quantum gate matrices.

Matrices are tuples of rows of ``Complex`` values and are never mutated.
For multi-qubit matrices the first listed qubit is the most significant bit
of the row/column index, e.g. ``CNOT`` maps |10> to |11> with the control
first.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

import torch

from quantum_sim.core.complex import SQRT2_INV, Complex
from quantum_sim.errors import InvalidGateError, MissingParameterError

from .kinds import GateKind

Matrix = Tuple[Tuple[Complex, ...], ...]


def _real_matrix(rows: Sequence[Sequence[float]]) -> Matrix:
    return tuple(tuple(Complex(float(v)) for v in row) for row in rows)


def _complex_matrix(rows: Sequence[Sequence[complex]]) -> Matrix:
    return tuple(tuple(Complex.from_builtin(v) for v in row) for row in rows)


def _permutation_matrix(dim: int, swapped: Tuple[int, int]) -> Matrix:
    """Identity of size ``dim`` with basis states ``swapped`` exchanged."""
    a, b = swapped
    rows = []
    for i in range(dim):
        col = b if i == a else a if i == b else i
        rows.append(tuple(Complex.one() if j == col else Complex.zero() for j in range(dim)))
    return tuple(rows)


def rx(theta: float) -> Matrix:
    """
    Rotation about the X axis, ``exp(-i theta X / 2)``.

        [[cos(θ/2), -i sin(θ/2)],
         [-i sin(θ/2), cos(θ/2)]]
    """
    c = math.cos(theta / 2.0)
    s = math.sin(theta / 2.0)
    return (
        (Complex(c), Complex(0.0, -s)),
        (Complex(0.0, -s), Complex(c)),
    )


def ry(theta: float) -> Matrix:
    """
    Rotation about the Y axis, ``exp(-i theta Y / 2)``.

        [[cos(θ/2), -sin(θ/2)],
         [sin(θ/2), cos(θ/2)]]
    """
    c = math.cos(theta / 2.0)
    s = math.sin(theta / 2.0)
    return (
        (Complex(c), Complex(-s)),
        (Complex(s), Complex(c)),
    )


def rz(theta: float) -> Matrix:
    """
    Rotation about the Z axis, ``exp(-i theta Z / 2)``.

        [[exp(-iθ/2), 0],
         [0, exp(iθ/2)]]
    """
    return (
        (Complex.from_polar(1.0, -theta / 2.0), Complex.zero()),
        (Complex.zero(), Complex.from_polar(1.0, theta / 2.0)),
    )


def phase(phi: float) -> Matrix:
    """Phase gate ``diag(1, exp(i phi))``."""
    return (
        (Complex.one(), Complex.zero()),
        (Complex.zero(), Complex.from_polar(1.0, phi)),
    )


GATES: Mapping[str, Matrix] = MappingProxyType(
    {
        "I": _real_matrix([[1, 0], [0, 1]]),
        "X": _real_matrix([[0, 1], [1, 0]]),
        "Y": _complex_matrix([[0, -1j], [1j, 0]]),
        "Z": _real_matrix([[1, 0], [0, -1]]),
        "H": _real_matrix([[SQRT2_INV, SQRT2_INV], [SQRT2_INV, -SQRT2_INV]]),
        "S": _complex_matrix([[1, 0], [0, 1j]]),
        "Sdg": _complex_matrix([[1, 0], [0, -1j]]),
        "T": (
            (Complex.one(), Complex.zero()),
            (Complex.zero(), Complex.from_polar(1.0, math.pi / 4.0)),
        ),
        "Tdg": (
            (Complex.one(), Complex.zero()),
            (Complex.zero(), Complex.from_polar(1.0, -math.pi / 4.0)),
        ),
        "SX": _complex_matrix(
            [[0.5 + 0.5j, 0.5 - 0.5j], [0.5 - 0.5j, 0.5 + 0.5j]]
        ),
    }
)

TWO_QUBIT_GATES: Mapping[str, Matrix] = MappingProxyType(
    {
        "CNOT": _permutation_matrix(4, (2, 3)),
        "CZ": _real_matrix(
            [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, -1]]
        ),
        "SWAP": _permutation_matrix(4, (1, 2)),
        "iSWAP": _complex_matrix(
            [[1, 0, 0, 0], [0, 0, 1j, 0], [0, 1j, 0, 0], [0, 0, 0, 1]]
        ),
        "SQSWAP": _complex_matrix(
            [
                [1, 0, 0, 0],
                [0, 0.5 + 0.5j, 0.5 - 0.5j, 0],
                [0, 0.5 - 0.5j, 0.5 + 0.5j, 0],
                [0, 0, 0, 1],
            ]
        ),
    }
)

THREE_QUBIT_GATES: Mapping[str, Matrix] = MappingProxyType(
    {
        # Controls are the two leading qubits: |110> <-> |111>.
        "TOFFOLI": _permutation_matrix(8, (6, 7)),
        # Control is the leading qubit: |101> <-> |110>.
        "FREDKIN": _permutation_matrix(8, (5, 6)),
    }
)

_FIXED_KIND_MATRICES: Mapping[GateKind, Matrix] = MappingProxyType(
    {
        GateKind.H: GATES["H"],
        GateKind.X: GATES["X"],
        GateKind.Y: GATES["Y"],
        GateKind.Z: GATES["Z"],
        GateKind.S: GATES["S"],
        GateKind.SDG: GATES["Sdg"],
        GateKind.T: GATES["T"],
        GateKind.TDG: GATES["Tdg"],
    }
)

_ROTATIONS = {
    GateKind.RX: rx,
    GateKind.RY: ry,
    GateKind.RZ: rz,
    GateKind.P: phase,
}


def single_qubit_matrix(
    kind: GateKind, params: Optional[Sequence[float]] = None
) -> Matrix:
    """
    Map a single-qubit gate kind and its parameters to a 2x2 matrix.

    Raises
    ------
    MissingParameterError
        If a rotation or phase gate has no angle.
    InvalidGateError
        If ``kind`` is not a single-qubit unitary.
    """
    fixed = _FIXED_KIND_MATRICES.get(kind)
    if fixed is not None:
        return fixed

    rotation = _ROTATIONS.get(kind)
    if rotation is None:
        raise InvalidGateError(f"Gate {kind} has no single-qubit matrix.")
    if not params:
        raise MissingParameterError(f"Gate {kind} requires an angle parameter.")
    return rotation(float(params[0]))


def dagger(matrix: Matrix) -> Matrix:
    """Conjugate transpose."""
    n = len(matrix)
    return tuple(
        tuple(matrix[j][i].conjugate() for j in range(n)) for i in range(n)
    )


def to_tensor(
    matrix: Matrix,
    dtype: torch.dtype = torch.complex128,
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """Convert a matrix to a dense complex tensor of shape (dim, dim)."""
    if device is None:
        device = torch.device("cpu")
    return torch.tensor(
        [[complex(v) for v in row] for row in matrix],
        dtype=dtype,
        device=device,
    )


def is_unitary(matrix: Matrix | torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U†U = I, where U† is the conjugate transpose.
    Accepts either a ``Complex`` matrix or a tensor of shape (..., n, n).
    """
    if not isinstance(matrix, torch.Tensor):
        if any(len(row) != len(matrix) for row in matrix):
            return False
        matrix = to_tensor(matrix)

    if matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    if product.ndim > 2:
        identity = identity.expand(product.shape)

    diff = torch.abs(product - identity)
    return bool(torch.all(diff < atol).item())


__all__ = [
    "Matrix",
    "GATES",
    "TWO_QUBIT_GATES",
    "THREE_QUBIT_GATES",
    "rx",
    "ry",
    "rz",
    "phase",
    "single_qubit_matrix",
    "dagger",
    "to_tensor",
    "is_unitary",
]
