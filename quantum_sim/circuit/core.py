"""Core circuit IR types and simulation."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple, Union

import torch

from quantum_sim.backend.statevector import StateVector
from quantum_sim.errors import (
    InvalidGateError,
    InvalidQubitIndexError,
    MissingParameterError,
)
from quantum_sim.gates.kinds import GateKind
from quantum_sim.gates.standard import GATES, single_qubit_matrix
from quantum_sim.logging import get_logger

if TYPE_CHECKING:
    from quantum_sim.sampling.shots import SampleResult

logger = get_logger(__name__)

# Upper bound on circuit width; the dense amplitude list grows as 2**n.
MAX_QUBITS = 24


@dataclass(frozen=True)
class GateOp:
    """
    A single gate application in a quantum circuit.

    Attributes
    ----------
    kind:
        Which gate is applied.
    qubits:
        Qubit indices (0-based). For controlled gates the controls come
        first and the target last.
    params:
        Angle parameters in radians; empty for non-parametric gates.
    """

    kind: GateKind
    qubits: Tuple[int, ...]
    params: Tuple[float, ...] = ()

    @property
    def name(self) -> str:
        """Wire name of the gate, e.g. ``"Rx"`` or ``"CX"``."""
        return self.kind.wire_name


def _qubit_index(qubit: Any) -> int:
    """Return ``qubit`` as an int; floats and bools are rejected, not truncated."""
    if isinstance(qubit, bool):
        raise InvalidGateError(f"Qubit index must be an integer, got {qubit!r}.")
    try:
        return operator.index(qubit)
    except TypeError:
        raise InvalidGateError(
            f"Qubit index must be an integer, got {type(qubit).__name__} {qubit!r}."
        ) from None


def _validate_op(
    kind: GateKind,
    qubits: Tuple[int, ...],
    params: Tuple[float, ...],
    n_qubits: int,
) -> None:
    if len(qubits) != kind.n_qubits:
        raise InvalidGateError(
            f"Gate {kind} acts on {kind.n_qubits} qubit(s), got {len(qubits)}: "
            f"{list(qubits)}."
        )
    for q in qubits:
        if q < 0 or q >= n_qubits:
            raise InvalidQubitIndexError(q, n_qubits)
    if len(set(qubits)) != len(qubits):
        raise InvalidGateError(
            f"Gate {kind} requires distinct qubits, got {list(qubits)}."
        )
    if len(params) < kind.n_params:
        raise MissingParameterError(
            f"Gate {kind} requires {kind.n_params} angle parameter(s), "
            f"got {len(params)}."
        )
    if len(params) > kind.n_params:
        raise InvalidGateError(
            f"Gate {kind} takes {kind.n_params} parameter(s), got {len(params)}."
        )
    for p in params:
        if not math.isfinite(p):
            raise InvalidGateError(f"Gate {kind} angle must be finite, got {p}.")


class QuantumCircuit:
    """
    An ordered list of gate applications on ``n_qubits`` qubits.

    Every gate method appends one operation to this circuit *in place* and
    returns the same circuit, so calls can be chained::

        bell = QuantumCircuit(2).h(0).cx(0, 1)

    Operations are validated when they are appended. ``run()`` replays them
    on a fresh |0...0> statevector.
    """

    def __init__(self, n_qubits: int) -> None:
        """Initialize an empty circuit."""
        n_qubits = int(n_qubits)
        if n_qubits < 1 or n_qubits > MAX_QUBITS:
            raise ValueError(
                f"QuantumCircuit requires 1 <= n_qubits <= {MAX_QUBITS}, got {n_qubits}."
            )
        self._n_qubits = n_qubits
        self._ops: List[GateOp] = []
        self._state: Optional[StateVector] = None

    @property
    def n_qubits(self) -> int:
        """Return the number of qubits in this circuit."""
        return self._n_qubits

    @property
    def operations(self) -> Tuple[GateOp, ...]:
        """Return a read-only tuple of all gate operations."""
        return tuple(self._ops)

    @property
    def state(self) -> StateVector:
        """
        Statevector from the last ``run()``.

        Before the first run, or after the operation list changed, this is
        the |0...0> state. Intended for display only.
        """
        if self._state is None:
            self._state = StateVector(self._n_qubits)
        return self._state

    def add_gate(
        self,
        name: Union[str, GateKind],
        qubits: Sequence[int],
        params: Optional[Sequence[float]] = None,
    ) -> "QuantumCircuit":
        """
        Append a gate application to the circuit.

        Parameters
        ----------
        name:
            A ``GateKind`` or a gate name such as ``"H"``, ``"CX"`` or ``"Rx"``.
        qubits:
            Qubit indices (0-based), controls first.
        params:
            Angle parameters for ``Rx``, ``Ry``, ``Rz`` and ``P``.

        Raises
        ------
        UnknownGateError
            If the gate name is not supported.
        InvalidQubitIndexError
            If a qubit index is outside ``[0, n_qubits)``.
        MissingParameterError
            If a parametrized gate has no angle.
        InvalidGateError
            On wrong arity, non-integer or repeated qubits, surplus parameters
            or non-finite angles.
        """
        kind = GateKind.from_name(name)
        q_tuple = tuple(_qubit_index(q) for q in qubits)
        p_tuple = tuple(float(p) for p in params) if params is not None else ()
        _validate_op(kind, q_tuple, p_tuple, self._n_qubits)

        self._ops.append(GateOp(kind=kind, qubits=q_tuple, params=p_tuple))
        self._state = None
        return self

    def append(self, op: GateOp) -> "QuantumCircuit":
        """Append an existing ``GateOp`` after validating it against this circuit."""
        return self.add_gate(op.kind, op.qubits, op.params)

    def reset(self) -> "QuantumCircuit":
        """Remove every operation and drop the cached state."""
        self._ops.clear()
        self._state = None
        return self

    # Single-qubit gates

    def h(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.H, [qubit])

    def x(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.X, [qubit])

    def y(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.Y, [qubit])

    def z(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.Z, [qubit])

    def s(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.S, [qubit])

    def sdg(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.SDG, [qubit])

    def t(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.T, [qubit])

    def tdg(self, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.TDG, [qubit])

    # Rotations

    def rx(self, theta: float, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.RX, [qubit], [theta])

    def ry(self, theta: float, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.RY, [qubit], [theta])

    def rz(self, theta: float, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.RZ, [qubit], [theta])

    def p(self, phi: float, qubit: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.P, [qubit], [phi])

    # Multi-qubit gates

    def cx(self, control: int, target: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.CX, [control, target])

    def cnot(self, control: int, target: int) -> "QuantumCircuit":
        return self.cx(control, target)

    def cz(self, control: int, target: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.CZ, [control, target])

    def swap(self, qubit1: int, qubit2: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.SWAP, [qubit1, qubit2])

    def ccx(self, control1: int, control2: int, target: int) -> "QuantumCircuit":
        return self.add_gate(GateKind.CCX, [control1, control2, target])

    def toffoli(self, control1: int, control2: int, target: int) -> "QuantumCircuit":
        return self.ccx(control1, control2, target)

    # Measurement

    def measure(self, qubit: int) -> "QuantumCircuit":
        """Record a measurement. It has no effect on ``run()``."""
        return self.add_gate(GateKind.MEASURE, [qubit])

    def measure_all(self) -> "QuantumCircuit":
        for q in range(self._n_qubits):
            self.measure(q)
        return self

    # Execution

    def simulate(self) -> StateVector:
        """
        Replay all operations on a fresh statevector without touching the cache.

        ``MEASURE`` operations are skipped: the result is the exact final
        state, not a collapsed one.
        """
        state = StateVector(self._n_qubits)
        for op in self._ops:
            _apply_op(state, op)
        return state

    def run(self) -> StateVector:
        """
        Simulate the circuit from |0...0> and cache the result on ``state``.

        Returns
        -------
        StateVector
            A new statevector; earlier results are never modified.
        """
        logger.debug(
            "Running %d operation(s) on %d qubit(s)", len(self._ops), self._n_qubits
        )
        state = self.simulate()
        self._state = state
        return state

    def sample(
        self,
        shots: int = 1024,
        generator: Optional[torch.Generator] = None,
        workers: int = 1,
    ) -> "SampleResult":
        """
        Run the circuit ``shots`` times and measure every qubit once per run.

        Parameters
        ----------
        shots:
            Number of independent executions.
        generator:
            Seeded ``torch.Generator`` for reproducible results.
        workers:
            Number of worker threads sharing the shots.
        """
        from quantum_sim.sampling.shots import run_shots

        return run_shots(self, shots, generator=generator, workers=workers)

    # Serialization and display

    def to_json(self) -> Dict[str, Any]:
        """Return the ``{"numQubits", "operations"}`` wire form."""
        from quantum_sim.io.json_ir import circuit_to_json

        return circuit_to_json(self)

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> "QuantumCircuit":
        """Rebuild a circuit from its wire form, validating every operation."""
        from quantum_sim.io.json_ir import json_to_circuit

        return json_to_circuit(obj)

    def draw(self) -> str:
        """Return a text diagram of the circuit."""
        from quantum_sim.viz.drawer import draw_circuit

        return draw_circuit(self)

    # Analysis

    def copy(self) -> "QuantumCircuit":
        """Return a copy with its own operation list (the cached state is not copied)."""
        new = QuantumCircuit(self._n_qubits)
        new._ops.extend(self._ops)
        return new

    def __len__(self) -> int:
        """Return the number of operations in this circuit."""
        return len(self._ops)

    def __repr__(self) -> str:
        return f"QuantumCircuit(n_qubits={self._n_qubits}, operations={len(self._ops)})"

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping wire names to their counts."""
        counts: Dict[str, int] = {}
        for op in self._ops:
            counts[op.name] = counts.get(op.name, 0) + 1
        return counts

    def depth(self) -> int:
        """
        Number of sequential layers when gates on disjoint qubits share a layer.

        Measurements count as operations on their qubit.
        """
        qubit_layer = [0] * self._n_qubits
        max_layer = 0

        for op in self._ops:
            layer = max(qubit_layer[q] for q in op.qubits) + 1
            for q in op.qubits:
                qubit_layer[q] = layer
            max_layer = max(max_layer, layer)

        return max_layer


def _apply_op(state: StateVector, op: GateOp) -> None:
    """Apply one operation to ``state`` in place."""
    kind = op.kind
    if kind is GateKind.MEASURE:
        return
    if kind.n_qubits == 1:
        state.apply_single_qubit_gate(single_qubit_matrix(kind, op.params), op.qubits[0])
    elif kind is GateKind.CX:
        state.apply_cnot(op.qubits[0], op.qubits[1])
    elif kind is GateKind.CZ:
        control, target = op.qubits
        state.apply_single_qubit_gate(GATES["H"], target)
        state.apply_cnot(control, target)
        state.apply_single_qubit_gate(GATES["H"], target)
    elif kind is GateKind.SWAP:
        state.apply_swap(op.qubits[0], op.qubits[1])
    elif kind is GateKind.CCX:
        apply_toffoli(state, *op.qubits)
    else:
        raise InvalidGateError(f"No execution rule for gate {kind}.")


def apply_toffoli(state: StateVector, control1: int, control2: int, target: int) -> None:
    """Apply CCX as the standard 15-step H / T / T† / CNOT decomposition."""
    h, t, tdg = GATES["H"], GATES["T"], GATES["Tdg"]
    c1, c2 = control1, control2

    state.apply_single_qubit_gate(h, target)
    state.apply_cnot(c2, target)
    state.apply_single_qubit_gate(tdg, target)
    state.apply_cnot(c1, target)
    state.apply_single_qubit_gate(t, target)
    state.apply_cnot(c2, target)
    state.apply_single_qubit_gate(tdg, target)
    state.apply_cnot(c1, target)
    state.apply_single_qubit_gate(t, c2)
    state.apply_single_qubit_gate(t, target)
    state.apply_single_qubit_gate(h, target)
    state.apply_cnot(c1, c2)
    state.apply_single_qubit_gate(t, c1)
    state.apply_single_qubit_gate(tdg, c2)
    state.apply_cnot(c1, c2)


__all__ = ["GateOp", "QuantumCircuit", "MAX_QUBITS", "apply_toffoli"]
