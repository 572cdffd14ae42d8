"""Circuit IR for quantum circuits."""

from .core import MAX_QUBITS, GateOp, QuantumCircuit, apply_toffoli

__all__ = ["GateOp", "QuantumCircuit", "MAX_QUBITS", "apply_toffoli"]
