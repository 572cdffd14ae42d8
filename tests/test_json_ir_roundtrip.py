"""Tests for JSON circuit serialization."""

import json
import math

import pytest

from conftest import assert_states_close
from quantum_sim.circuit import QuantumCircuit
from quantum_sim.errors import MalformedCircuitJSONError
from quantum_sim.io import (
    circuit_to_json,
    dump_json_circuit,
    dumps,
    json_to_circuit,
    load_json_circuit,
    loads,
)
from quantum_sim.io.schema import json_circuit_schema, validate_json_circuit


def _build_circuit() -> QuantumCircuit:
    return (
        QuantumCircuit(3)
        .h(0)
        .cx(0, 1)
        .rz(0.3, 1)
        .p(math.pi / 4, 2)
        .cz(1, 2)
        .swap(0, 2)
        .ccx(0, 1, 2)
        .sdg(1)
        .measure(0)
    )


def test_json_roundtrip_preserves_operations() -> None:
    qc = _build_circuit()
    rebuilt = json_to_circuit(circuit_to_json(qc))

    assert rebuilt.n_qubits == qc.n_qubits
    assert rebuilt.operations == qc.operations
    assert_states_close(rebuilt.run(), qc.run())


def test_wire_form() -> None:
    obj = circuit_to_json(QuantumCircuit(2).h(0).cx(0, 1).rx(0.5, 1))
    assert obj == {
        "numQubits": 2,
        "operations": [
            {"name": "H", "qubits": [0]},
            {"name": "CX", "qubits": [0, 1]},
            {"name": "Rx", "qubits": [1], "params": [0.5]},
        ],
    }


def test_method_forms() -> None:
    qc = _build_circuit()
    assert qc.to_json() == circuit_to_json(qc)
    assert QuantumCircuit.from_json(qc.to_json()).operations == qc.operations


def test_aliases_and_case_are_accepted() -> None:
    obj = {
        "numQubits": 3,
        "operations": [
            {"name": "cnot", "qubits": [0, 1]},
            {"name": "Toffoli", "qubits": [0, 1, 2]},
            {"name": "phase", "qubits": [2], "params": [1.0]},
            {"name": "m", "qubits": [0]},
        ],
    }
    names = [op.name for op in json_to_circuit(obj).operations]
    assert names == ["CX", "CCX", "P", "MEASURE"]


def test_null_params_treated_as_empty() -> None:
    qc = json_to_circuit(
        {"numQubits": 1, "operations": [{"name": "H", "qubits": [0], "params": None}]}
    )
    assert qc.operations[0].params == ()


def test_string_roundtrip() -> None:
    qc = _build_circuit()
    text = dumps(qc)
    assert json.loads(text)["numQubits"] == 3
    assert loads(text).operations == qc.operations
    assert "\n" in dumps(qc, indent=2)


def test_file_roundtrip(tmp_path) -> None:
    qc = _build_circuit()
    path = tmp_path / "circuit.json"
    dump_json_circuit(qc, str(path))

    assert json.loads(path.read_text(encoding="utf-8")) == circuit_to_json(qc)
    assert load_json_circuit(str(path)).operations == qc.operations


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_json_circuit(str(tmp_path / "missing.json"))


def test_invalid_json_text() -> None:
    with pytest.raises(MalformedCircuitJSONError, match="Invalid JSON"):
        loads("{not json")


@pytest.mark.parametrize(
    "obj,match",
    [
        ([], "must be an object"),
        ({"operations": []}, "numQubits"),
        ({"numQubits": "2", "operations": []}, "integer"),
        ({"numQubits": True, "operations": []}, "integer"),
        ({"numQubits": 0, "operations": []}, "must be in"),
        ({"numQubits": 1}, "operations"),
        ({"numQubits": 1, "operations": {}}, "must be a list"),
        ({"numQubits": 1, "operations": ["H"]}, "index 0"),
        ({"numQubits": 1, "operations": [{"qubits": [0]}]}, "'name'"),
        ({"numQubits": 1, "operations": [{"name": "FOO", "qubits": [0]}]}, "Unsupported gate"),
        ({"numQubits": 1, "operations": [{"name": "H"}]}, "'qubits'"),
        ({"numQubits": 2, "operations": [{"name": "CX", "qubits": [0]}]}, "acts on 2"),
        ({"numQubits": 1, "operations": [{"name": "H", "qubits": [1]}]}, "out of range"),
        ({"numQubits": 1, "operations": [{"name": "H", "qubits": [0.0]}]}, "integer"),
        ({"numQubits": 2, "operations": [{"name": "CZ", "qubits": [1, 1]}]}, "distinct"),
        ({"numQubits": 1, "operations": [{"name": "Rx", "qubits": [0]}]}, "param"),
        (
            {"numQubits": 1, "operations": [{"name": "Rx", "qubits": [0], "params": ["a"]}]},
            "param",
        ),
        (
            {"numQubits": 1, "operations": [{"name": "H", "qubits": [0], "params": [0.1]}]},
            "param",
        ),
    ],
)
def test_malformed_circuits(obj, match: str) -> None:
    with pytest.raises(MalformedCircuitJSONError, match=match):
        json_to_circuit(obj)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_angle_literals_are_rejected(literal: str) -> None:
    text = (
        '{"numQubits": 1, "operations": '
        f'[{{"name": "Rx", "qubits": [0], "params": [{literal}]}}]}}'
    )
    with pytest.raises(MalformedCircuitJSONError, match="finite"):
        loads(text)


def test_malformed_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_json_circuit({"numQubits": 1, "operations": [{"name": "H", "qubits": [3]}]})


def test_second_operation_is_named_in_error() -> None:
    obj = {
        "numQubits": 2,
        "operations": [
            {"name": "H", "qubits": [0]},
            {"name": "CX", "qubits": [0, 2]},
        ],
    }
    with pytest.raises(MalformedCircuitJSONError, match="index 1"):
        validate_json_circuit(obj)


def test_schema_lists_gate_names() -> None:
    schema = json_circuit_schema()
    names = schema["operations"]["items"]["name"]["enum"]
    assert "CCX" in names and "Sdg" in names
    assert schema["numQubits"]["min"] == 1
