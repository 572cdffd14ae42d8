"""quantum-sim - an exact statevector simulator for small quantum circuits.

Example
-------
>>> from quantum_sim import QuantumCircuit
>>> bell = QuantumCircuit(2).h(0).cx(0, 1)
>>> print(bell.run())
(0.707)|00⟩ + (0.707)|11⟩
>>> bell.sample(1000).counts  # doctest: +SKIP
{'00': 497, '11': 503}
"""

__version__ = "0.1.0"

# Core types
from .core import SQRT2, SQRT2_INV, Complex

# Errors
from .errors import (
    DegenerateMeasurementError,
    InvalidGateError,
    InvalidQubitIndexError,
    MalformedCircuitJSONError,
    MissingParameterError,
    QuantumSimError,
    UnknownGateError,
)

# Gates
from .gates import (
    GATES,
    THREE_QUBIT_GATES,
    TWO_QUBIT_GATES,
    GateKind,
    Matrix,
    is_unitary,
    phase,
    rx,
    ry,
    rz,
)

# Backend
from .backend import (
    AmplitudeEntry,
    BasisMeasurement,
    QubitMeasurement,
    StateVector,
    apply_dense_gate,
)

# Circuit IR
from .circuit import GateOp, QuantumCircuit

# Sampling
from .sampling import SampleResult, counts_to_probs, merge_counts, run_shots

# I/O
from .io import circuit_to_json, dump_json_circuit, json_to_circuit, load_json_circuit

# Diagnostics
from .diagnostics import (
    assert_normalized,
    debug_context,
    fidelity,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)

# Visualization
from .viz import draw_circuit

__all__ = [
    "__version__",
    # Core
    "Complex",
    "SQRT2",
    "SQRT2_INV",
    # Errors
    "QuantumSimError",
    "InvalidQubitIndexError",
    "InvalidGateError",
    "UnknownGateError",
    "MissingParameterError",
    "MalformedCircuitJSONError",
    "DegenerateMeasurementError",
    # Gates
    "GateKind",
    "Matrix",
    "GATES",
    "TWO_QUBIT_GATES",
    "THREE_QUBIT_GATES",
    "rx",
    "ry",
    "rz",
    "phase",
    "is_unitary",
    # Backend
    "StateVector",
    "QubitMeasurement",
    "BasisMeasurement",
    "AmplitudeEntry",
    "apply_dense_gate",
    # Circuit IR
    "GateOp",
    "QuantumCircuit",
    # Sampling
    "SampleResult",
    "run_shots",
    "merge_counts",
    "counts_to_probs",
    # I/O
    "circuit_to_json",
    "json_to_circuit",
    "dump_json_circuit",
    "load_json_circuit",
    # Diagnostics
    "state_norm",
    "assert_normalized",
    "fidelity",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Visualization
    "draw_circuit",
]
