"""Statevector backend for pure quantum states.

Amplitudes are stored as a list of ``Complex`` values indexed by basis
integer. Gates are applied in place by pairing amplitudes whose indices
differ only in the bits the gate acts on, so no 2^n x 2^n operator is ever
built.

Convention: qubit 0 is the least significant bit (LSB) of the basis index.
In a 2-qubit state |q1 q0>, qubit 0 corresponds to the rightmost bit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np
import torch

from quantum_sim.core.complex import Complex
from quantum_sim.diagnostics import assert_normalized, is_debug_enabled
from quantum_sim.errors import (
    DegenerateMeasurementError,
    InvalidGateError,
    InvalidQubitIndexError,
)
from quantum_sim.gates.standard import Matrix, to_tensor

from .dense import apply_dense_gate


@dataclass(frozen=True)
class QubitMeasurement:
    """Outcome of measuring a single qubit."""

    outcome: int
    probability: float


@dataclass(frozen=True)
class BasisMeasurement:
    """Outcome of measuring every qubit in the computational basis."""

    bitstring: str
    index: int
    probability: float


@dataclass(frozen=True)
class AmplitudeEntry:
    """One row of ``StateVector.to_array()``."""

    amplitude: Complex
    basis: str
    probability: float


def resolve_generator(generator: Optional[torch.Generator]) -> torch.Generator:
    """Return ``generator`` or, if None, a fresh non-deterministically seeded one."""
    if generator is not None:
        return generator
    fresh = torch.Generator()
    fresh.seed()
    return fresh


def draw_uniform(generator: Optional[torch.Generator] = None) -> float:
    """Draw one float uniformly from [0, 1)."""
    gen = resolve_generator(generator)
    return float(torch.rand(1, generator=gen, dtype=torch.float64).item())


def format_basis(index: int, n_qubits: int) -> str:
    """Bitstring of ``index``, most significant qubit first, zero padded."""
    return format(index, "b").zfill(n_qubits)


class StateVector:
    """
    Exact pure state of ``n_qubits`` qubits.

    A new statevector is the all-zero basis state |0...0>. Every ``apply_*``
    method mutates the amplitudes in place; ``measure`` and ``measure_all``
    collapse them.
    """

    def __init__(self, n_qubits: int) -> None:
        if n_qubits < 1:
            raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")
        self.n_qubits = int(n_qubits)
        self.amplitudes: List[Complex] = [Complex.zero()] * (2**self.n_qubits)
        self.amplitudes[0] = Complex.one()

    @classmethod
    def basis_state(cls, n_qubits: int, index: int) -> "StateVector":
        """Return the computational basis state |index>."""
        state = cls(n_qubits)
        if index < 0 or index >= state.dimension:
            raise ValueError(
                f"basis index {index} out of range [0, {state.dimension})"
            )
        state.amplitudes[0] = Complex.zero()
        state.amplitudes[index] = Complex.one()
        return state

    @classmethod
    def from_amplitudes(cls, amplitudes: Iterable[Complex | complex]) -> "StateVector":
        """
        Build a state from explicit amplitudes.

        The length must be a power of two. Amplitudes are taken as given,
        no normalization is applied.
        """
        amps = [
            a if isinstance(a, Complex) else Complex.from_builtin(a)
            for a in amplitudes
        ]
        n_qubits = int(math.log2(len(amps))) if amps else 0
        if n_qubits < 1 or 2**n_qubits != len(amps):
            raise ValueError(
                f"number of amplitudes {len(amps)} is not a power of 2 >= 2."
            )
        state = cls(n_qubits)
        state.amplitudes = amps
        return state

    @classmethod
    def from_tensor(cls, tensor: torch.Tensor) -> "StateVector":
        """Build a state from a 1-D complex tensor."""
        if tensor.dim() != 1:
            raise ValueError(f"expected a 1-D tensor, got shape {tuple(tensor.shape)}")
        return cls.from_amplitudes(complex(v) for v in tensor.detach().cpu().tolist())

    @property
    def dimension(self) -> int:
        return len(self.amplitudes)

    def copy(self) -> "StateVector":
        """Return an independent copy (amplitudes are immutable, the list is not)."""
        new = StateVector(self.n_qubits)
        new.amplitudes = list(self.amplitudes)
        return new

    def probability(self, index: int) -> float:
        return self.amplitudes[index].magnitude_squared()

    def probabilities(self) -> List[float]:
        return [a.magnitude_squared() for a in self.amplitudes]

    def norm(self) -> float:
        return math.sqrt(sum(self.probabilities()))

    def to_tensor(
        self,
        dtype: torch.dtype = torch.complex128,
        device: Optional[torch.device] = None,
    ) -> torch.Tensor:
        """Return the amplitudes as a complex tensor of shape (2**n_qubits,)."""
        return torch.tensor(
            [complex(a) for a in self.amplitudes],
            dtype=dtype,
            device=device if device is not None else torch.device("cpu"),
        )

    def to_numpy(self) -> np.ndarray:
        """Return the amplitudes as a complex128 array of shape (2**n_qubits,)."""
        return np.array([complex(a) for a in self.amplitudes], dtype=np.complex128)

    def to_array(self) -> List[AmplitudeEntry]:
        """Amplitude, ket label and probability for every basis state."""
        return [
            AmplitudeEntry(
                amplitude=amp,
                basis=f"|{format_basis(i, self.n_qubits)}⟩",
                probability=amp.magnitude_squared(),
            )
            for i, amp in enumerate(self.amplitudes)
        ]

    def _check_qubit(self, qubit: int) -> None:
        if qubit < 0 or qubit >= self.n_qubits:
            raise InvalidQubitIndexError(qubit, self.n_qubits)

    def _check_distinct(self, *qubits: int) -> None:
        for q in qubits:
            self._check_qubit(q)
        if len(set(qubits)) != len(qubits):
            raise InvalidGateError(f"qubits must be distinct, got {list(qubits)}")

    def _after_gate(self) -> None:
        if is_debug_enabled():
            assert_normalized(self, atol=1e-9)

    def apply_single_qubit_gate(self, gate: Matrix, qubit: int) -> None:
        """
        Apply a 2x2 gate to one qubit.

        Each pair of indices (i0, i1) that differ only in bit ``qubit`` is
        replaced by ``gate @ (amp[i0], amp[i1])``.
        """
        self._check_qubit(qubit)
        g00, g01 = gate[0]
        g10, g11 = gate[1]
        amps = self.amplitudes
        mask = 1 << qubit

        for i0 in range(self.dimension):
            if i0 & mask:
                continue
            i1 = i0 | mask
            a0 = amps[i0]
            a1 = amps[i1]
            amps[i0] = g00 * a0 + g01 * a1
            amps[i1] = g10 * a0 + g11 * a1

        self._after_gate()

    def apply_controlled_gate(self, gate: Matrix, control: int, target: int) -> None:
        """Apply a 2x2 gate to ``target`` on the subspace where ``control`` is 1."""
        self._check_distinct(control, target)
        g00, g01 = gate[0]
        g10, g11 = gate[1]
        amps = self.amplitudes
        cmask = 1 << control
        tmask = 1 << target

        for i0 in range(self.dimension):
            if not i0 & cmask or i0 & tmask:
                continue
            i1 = i0 | tmask
            a0 = amps[i0]
            a1 = amps[i1]
            amps[i0] = g00 * a0 + g01 * a1
            amps[i1] = g10 * a0 + g11 * a1

        self._after_gate()

    def apply_cnot(self, control: int, target: int) -> None:
        """Flip ``target`` where ``control`` is 1. A pure permutation of amplitudes."""
        self._check_distinct(control, target)
        amps = self.amplitudes
        cmask = 1 << control
        tmask = 1 << target

        for i in range(self.dimension):
            if i & cmask and not i & tmask:
                j = i | tmask
                amps[i], amps[j] = amps[j], amps[i]

        self._after_gate()

    def apply_swap(self, qubit1: int, qubit2: int) -> None:
        """Exchange two qubits; each differing-bit pair is swapped once."""
        self._check_distinct(qubit1, qubit2)
        amps = self.amplitudes
        flip = (1 << qubit1) | (1 << qubit2)

        for i in range(self.dimension):
            if ((i >> qubit1) & 1) != ((i >> qubit2) & 1):
                j = i ^ flip
                if i < j:
                    amps[i], amps[j] = amps[j], amps[i]

        self._after_gate()

    def apply_matrix(self, matrix: Matrix | torch.Tensor, qubits: Sequence[int]) -> None:
        """
        Apply a dense 2^k x 2^k matrix to ``qubits`` via tensor contraction.

        ``qubits[0]`` is the most significant bit of the matrix index.
        """
        qubits = [int(q) for q in qubits]
        self._check_distinct(*qubits)
        gate = matrix if isinstance(matrix, torch.Tensor) else to_tensor(matrix)
        result = apply_dense_gate(self.to_tensor(), gate, qubits, self.n_qubits)
        self.amplitudes = [Complex.from_builtin(v) for v in result.tolist()]
        self._after_gate()

    def measure(
        self, qubit: int, generator: Optional[torch.Generator] = None
    ) -> QubitMeasurement:
        """
        Measure one qubit and collapse the state onto the observed outcome.

        Raises
        ------
        DegenerateMeasurementError
            If the selected outcome has probability exactly zero.
        """
        self._check_qubit(qubit)
        mask = 1 << qubit
        amps = self.amplitudes

        prob0 = 0.0
        prob1 = 0.0
        for i in range(self.dimension):
            if i & mask:
                prob1 += amps[i].magnitude_squared()
            else:
                prob0 += amps[i].magnitude_squared()

        r = draw_uniform(generator)
        outcome = 0 if r < prob0 else 1
        probability = prob0 if outcome == 0 else prob1
        if probability <= 0.0:
            raise DegenerateMeasurementError(qubit, outcome)

        norm_factor = 1.0 / math.sqrt(probability)
        for i in range(self.dimension):
            if ((i >> qubit) & 1) != outcome:
                amps[i] = Complex.zero()
            else:
                amps[i] = amps[i].scale(norm_factor)

        return QubitMeasurement(outcome=outcome, probability=probability)

    def measure_all(self, generator: Optional[torch.Generator] = None) -> BasisMeasurement:
        """
        Measure every qubit and collapse onto a single basis state.

        The returned bitstring lists qubit ``n_qubits - 1`` first and qubit 0
        last, matching the basis index written in binary.
        """
        probs = self.probabilities()
        r = draw_uniform(generator)

        measured = len(probs) - 1
        cumulative = 0.0
        for i, p in enumerate(probs):
            cumulative += p
            if r < cumulative:
                measured = i
                break

        self.amplitudes = [Complex.zero()] * self.dimension
        self.amplitudes[measured] = Complex.one()

        return BasisMeasurement(
            bitstring=format_basis(measured, self.n_qubits),
            index=measured,
            probability=probs[measured],
        )

    def __len__(self) -> int:
        return self.dimension

    def __repr__(self) -> str:
        return f"StateVector(n_qubits={self.n_qubits})"

    def __str__(self) -> str:
        terms = [
            f"({amp.to_latex()})|{format_basis(i, self.n_qubits)}⟩"
            for i, amp in enumerate(self.amplitudes)
            if amp.magnitude_squared() > 1e-10
        ]
        return " + ".join(terms) or "0"


__all__ = [
    "StateVector",
    "QubitMeasurement",
    "BasisMeasurement",
    "AmplitudeEntry",
    "resolve_generator",
    "draw_uniform",
    "format_basis",
]
