"""Backend implementations for quantum state operations."""

from .dense import apply_dense_gate
from .statevector import (
    AmplitudeEntry,
    BasisMeasurement,
    QubitMeasurement,
    StateVector,
    draw_uniform,
    format_basis,
    resolve_generator,
)

__all__ = [
    "StateVector",
    "QubitMeasurement",
    "BasisMeasurement",
    "AmplitudeEntry",
    "apply_dense_gate",
    "resolve_generator",
    "draw_uniform",
    "format_basis",
]
