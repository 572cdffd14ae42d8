"""JSON import/export for circuits."""

from .json_ir import (
    circuit_to_json,
    dump_json_circuit,
    dumps,
    json_to_circuit,
    load_json_circuit,
    loads,
)
from .schema import json_circuit_schema, validate_json_circuit

__all__ = [
    "circuit_to_json",
    "json_to_circuit",
    "dumps",
    "loads",
    "dump_json_circuit",
    "load_json_circuit",
    "json_circuit_schema",
    "validate_json_circuit",
]
