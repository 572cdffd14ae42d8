"""JSON wire format for circuits and its validation.

Schema Structure:
    {
        "numQubits": <integer>,
        "operations": [
            {
                "name": <string>,             # H, X, Y, Z, S, Sdg, T, Tdg,
                                              # Rx, Ry, Rz, P, CX, CZ, SWAP,
                                              # CCX, MEASURE
                "qubits": [<integer>, ...],   # controls first
                "params": [<number>, ...],    # optional, angles in radians
            },
            ...
        ]
    }

Qubit ordering convention:
    - qubit 0 is the least significant bit of the basis index
    - this matches the statevector backend convention
"""

from __future__ import annotations

import math
from typing import Any

from quantum_sim.circuit.core import MAX_QUBITS
from quantum_sim.errors import QuantumSimError, MalformedCircuitJSONError
from quantum_sim.gates.kinds import GateKind


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_circuit_schema() -> dict:
    """
    Return a structural description of the wire format.

    This is documentation in dict form, not a JSON Schema document.
    """
    return {
        "numQubits": {
            "type": "integer",
            "description": "Number of qubits in the circuit",
            "required": True,
            "min": 1,
            "max": MAX_QUBITS,
        },
        "operations": {
            "type": "list",
            "description": "Gate operations in execution order",
            "required": True,
            "items": {
                "name": {
                    "type": "string",
                    "description": "Gate name",
                    "required": True,
                    "enum": [kind.wire_name for kind in GateKind],
                },
                "qubits": {
                    "type": "list",
                    "description": "Qubit indices (0-based), controls first",
                    "required": True,
                    "items": {"type": "integer", "min": 0},
                },
                "params": {
                    "type": "list",
                    "description": "Angles in radians (Rx, Ry, Rz, P)",
                    "required": False,
                    "items": {"type": "number"},
                },
            },
        },
    }


def validate_json_circuit(obj: Any) -> None:
    """
    Validate a decoded JSON circuit.

    Checks field presence and types, that every gate name is known, that
    qubit and parameter counts match the gate's arity, and that every qubit
    index lies in ``[0, numQubits)``.

    Raises
    ------
    MalformedCircuitJSONError
        With a message naming the offending operation index.
    """
    if not isinstance(obj, dict):
        raise MalformedCircuitJSONError("JSON circuit must be an object.")

    if "numQubits" not in obj:
        raise MalformedCircuitJSONError("JSON circuit missing required field 'numQubits'.")
    n_qubits = obj["numQubits"]
    if not _is_int(n_qubits):
        raise MalformedCircuitJSONError("Field 'numQubits' must be an integer.")
    if n_qubits < 1 or n_qubits > MAX_QUBITS:
        raise MalformedCircuitJSONError(
            f"Field 'numQubits' must be in [1, {MAX_QUBITS}], got {n_qubits}."
        )

    if "operations" not in obj:
        raise MalformedCircuitJSONError("JSON circuit missing required field 'operations'.")
    if not isinstance(obj["operations"], list):
        raise MalformedCircuitJSONError("Field 'operations' must be a list.")

    for i, op in enumerate(obj["operations"]):
        if not isinstance(op, dict):
            raise MalformedCircuitJSONError(f"Operation at index {i} must be an object.")

        name = op.get("name")
        if not isinstance(name, str):
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: field 'name' must be a string."
            )
        try:
            kind = GateKind.from_name(name)
        except QuantumSimError as exc:
            raise MalformedCircuitJSONError(f"Operation at index {i}: {exc}") from exc

        qubits = op.get("qubits")
        if not isinstance(qubits, list):
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: field 'qubits' must be a list."
            )
        if len(qubits) != kind.n_qubits:
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: gate {kind} acts on {kind.n_qubits} "
                f"qubit(s), got {len(qubits)}."
            )
        for j, q in enumerate(qubits):
            if not _is_int(q):
                raise MalformedCircuitJSONError(
                    f"Operation at index {i}: qubits[{j}] must be an integer, "
                    f"got {type(q).__name__}."
                )
            if q < 0 or q >= n_qubits:
                raise MalformedCircuitJSONError(
                    f"Operation at index {i}: qubits[{j}] = {q} is out of range "
                    f"[0, {n_qubits})."
                )
        if len(set(qubits)) != len(qubits):
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: qubits must be distinct, got {qubits}."
            )

        params = op.get("params", [])
        if params is None:
            params = []
        if not isinstance(params, list):
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: field 'params' must be a list."
            )
        for j, p in enumerate(params):
            if not _is_number(p):
                raise MalformedCircuitJSONError(
                    f"Operation at index {i}: params[{j}] must be a number, "
                    f"got {type(p).__name__}."
                )
            if not math.isfinite(p):
                raise MalformedCircuitJSONError(
                    f"Operation at index {i}: params[{j}] must be finite, got {p}."
                )
        if len(params) != kind.n_params:
            raise MalformedCircuitJSONError(
                f"Operation at index {i}: gate {kind} takes {kind.n_params} "
                f"parameter(s), got {len(params)}."
            )


__all__ = ["json_circuit_schema", "validate_json_circuit"]
