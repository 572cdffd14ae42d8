"""JSON import and export for quantum circuits.

See schema.py for the wire format.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from quantum_sim.circuit import QuantumCircuit
from quantum_sim.errors import MalformedCircuitJSONError
from quantum_sim.logging import get_logger

from .schema import validate_json_circuit

logger = get_logger(__name__)


def circuit_to_json(circuit: QuantumCircuit) -> Dict[str, Any]:
    """
    Convert a QuantumCircuit to its wire form.

    ``params`` is only emitted for parametrized gates.
    """
    operations: List[Dict[str, Any]] = []
    for op in circuit.operations:
        op_obj: Dict[str, Any] = {"name": op.name, "qubits": list(op.qubits)}
        if op.params:
            op_obj["params"] = [float(p) for p in op.params]
        operations.append(op_obj)

    return {"numQubits": circuit.n_qubits, "operations": operations}


def json_to_circuit(obj: Dict[str, Any]) -> QuantumCircuit:
    """
    Rebuild a QuantumCircuit from its wire form.

    Raises
    ------
    MalformedCircuitJSONError
        If the object does not conform to the wire format.
    """
    validate_json_circuit(obj)

    circuit = QuantumCircuit(obj["numQubits"])
    for op_obj in obj["operations"]:
        circuit.add_gate(op_obj["name"], op_obj["qubits"], op_obj.get("params"))

    logger.debug(
        "Loaded circuit with %d qubit(s) and %d operation(s)",
        circuit.n_qubits,
        len(circuit),
    )
    return circuit


def dumps(circuit: QuantumCircuit, indent: int | None = None) -> str:
    """Serialize a circuit to a JSON string."""
    return json.dumps(circuit_to_json(circuit), indent=indent, ensure_ascii=False)


def loads(text: str) -> QuantumCircuit:
    """
    Parse a circuit from a JSON string.

    Raises
    ------
    MalformedCircuitJSONError
        If the text is not valid JSON or not a valid circuit.
    """
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedCircuitJSONError(f"Invalid JSON: {e}") from e
    return json_to_circuit(obj)


def dump_json_circuit(circuit: QuantumCircuit, path: str) -> None:
    """Write a QuantumCircuit to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(circuit_to_json(circuit), f, indent=2, ensure_ascii=False)
    logger.debug("Wrote circuit to %s", path)


def load_json_circuit(path: str) -> QuantumCircuit:
    """
    Load a QuantumCircuit from a JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    MalformedCircuitJSONError
        If the file is not valid JSON or not a valid circuit.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug("Read circuit from %s", path)
    return loads(text)


__all__ = [
    "circuit_to_json",
    "json_to_circuit",
    "dumps",
    "loads",
    "dump_json_circuit",
    "load_json_circuit",
]
