"""Exception types raised by quantum-sim.

Every validation error also derives from ``ValueError`` so callers that only
catch the builtin keep working.
"""

from __future__ import annotations


class QuantumSimError(Exception):
    """Base class for all quantum-sim errors."""


class InvalidQubitIndexError(QuantumSimError, ValueError):
    """A qubit index lies outside ``[0, n_qubits)``."""

    def __init__(self, qubit: int, n_qubits: int) -> None:
        self.qubit = qubit
        self.n_qubits = n_qubits
        super().__init__(
            f"Qubit index {qubit} is out of range [0, {n_qubits})."
        )


class InvalidGateError(QuantumSimError, ValueError):
    """A gate application has the wrong shape (arity, duplicates, extra params)."""


class UnknownGateError(InvalidGateError):
    """A gate name is not part of the supported vocabulary."""


class MissingParameterError(QuantumSimError, ValueError):
    """A parametrized gate was applied without its angle."""


class MalformedCircuitJSONError(QuantumSimError, ValueError):
    """A serialized circuit does not conform to the wire format."""


class DegenerateMeasurementError(QuantumSimError, ArithmeticError):
    """A measurement selected an outcome whose probability is zero."""

    def __init__(self, qubit: int, outcome: int) -> None:
        self.qubit = qubit
        self.outcome = outcome
        super().__init__(
            f"Measurement of qubit {qubit} selected outcome {outcome} "
            "with zero probability; the state cannot be renormalized."
        )


__all__ = [
    "QuantumSimError",
    "InvalidQubitIndexError",
    "InvalidGateError",
    "UnknownGateError",
    "MissingParameterError",
    "MalformedCircuitJSONError",
    "DegenerateMeasurementError",
]
