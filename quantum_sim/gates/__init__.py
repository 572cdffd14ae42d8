"""Gate vocabulary and matrix library."""

from .kinds import GateKind
from .standard import (
    GATES,
    THREE_QUBIT_GATES,
    TWO_QUBIT_GATES,
    Matrix,
    dagger,
    is_unitary,
    phase,
    rx,
    ry,
    rz,
    single_qubit_matrix,
    to_tensor,
)

__all__ = [
    "GateKind",
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
