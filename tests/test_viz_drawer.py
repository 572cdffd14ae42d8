"""Tests for the text circuit drawer."""

import math
from io import StringIO

import pytest

from quantum_sim.circuit import QuantumCircuit
from quantum_sim.viz import draw_circuit, format_angle, print_circuit


def test_bell_diagram() -> None:
    qc = QuantumCircuit(2).h(0).cx(0, 1)
    assert draw_circuit(qc) == "q0: ─[H]──●─\nq1: ──────⊕─"
    assert qc.draw() == draw_circuit(qc)


def test_empty_circuit() -> None:
    assert draw_circuit(QuantumCircuit(2)) == "q0:\nq1:"


def test_crossed_wire_shows_connector() -> None:
    lines = draw_circuit(QuantumCircuit(3).cx(0, 2)).splitlines()
    assert lines == ["q0: ─●─", "q1: ─│─", "q2: ─⊕─"]


def test_multi_qubit_symbols() -> None:
    lines = draw_circuit(QuantumCircuit(3).cz(0, 1).swap(1, 2).ccx(0, 1, 2)).splitlines()
    assert lines[0] == "q0: ─●─────●─"
    assert lines[1] == "q1: ─●──X──●─"
    assert lines[2] == "q2: ────X──⊕─"


def test_parametric_and_measure_labels() -> None:
    diagram = draw_circuit(QuantumCircuit(1).rx(math.pi / 2, 0).measure(0))
    assert diagram == "q0: ─[Rx(π/2)]──[M]─"


def test_ascii_mode() -> None:
    qc = QuantumCircuit(2).h(0).cx(0, 1).rz(math.pi, 1)
    diagram = draw_circuit(qc, use_ascii=True)
    assert diagram.isascii()
    assert diagram.splitlines()[0].startswith("q0: -[H]--*-")
    assert "[Rz(pi)]" in diagram


def test_wide_register_labels_align() -> None:
    lines = draw_circuit(QuantumCircuit(11).x(10)).splitlines()
    assert lines[0].startswith("q0:  ")
    assert lines[10].startswith("q10: ─[X]─")


def test_print_circuit() -> None:
    out = StringIO()
    print_circuit(QuantumCircuit(1).h(0), file=out)
    assert out.getvalue() == "q0: ─[H]─\n"


@pytest.mark.parametrize(
    "theta,expected",
    [
        (0.0, "0"),
        (math.pi, "π"),
        (math.pi / 2, "π/2"),
        (math.pi / 4, "π/4"),
        (3 * math.pi / 4, "3π/4"),
        (-math.pi / 2, "-π/2"),
        (2 * math.pi, "2π"),
        (0.3, "0.300"),
    ],
)
def test_format_angle(theta: float, expected: str) -> None:
    assert format_angle(theta) == expected


def test_format_angle_ascii() -> None:
    assert format_angle(math.pi / 4, pi_symbol="pi") == "pi/4"
