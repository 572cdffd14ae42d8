"""Tests for norm checks, overlaps and debug mode."""

import pytest

from conftest import random_state
from quantum_sim.backend import StateVector
from quantum_sim.circuit import QuantumCircuit
from quantum_sim.core import SQRT2_INV, Complex
from quantum_sim.diagnostics import (
    assert_normalized,
    debug_context,
    fidelity,
    inner_product,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)


def test_state_norm_accepts_states_and_iterables() -> None:
    assert state_norm(StateVector(3)) == pytest.approx(1.0)
    assert state_norm([Complex(3.0), Complex(0.0, 4.0)]) == pytest.approx(5.0)


def test_assert_normalized() -> None:
    assert_normalized(random_state(3))
    with pytest.raises(ValueError, match="not normalized"):
        assert_normalized([Complex(1.0), Complex(1.0)])
    with pytest.raises(ValueError, match="not finite"):
        assert_normalized([Complex(float("inf"))])
    assert_normalized([Complex(1.0 + 1e-4)], atol=1e-3)


def test_inner_product_and_fidelity() -> None:
    zero = StateVector(1)
    plus = QuantumCircuit(1).h(0).run()
    assert inner_product(zero, plus).equals(Complex(SQRT2_INV))
    assert fidelity(zero, plus) == pytest.approx(0.5)
    assert fidelity(plus, plus) == pytest.approx(1.0)

    with pytest.raises(ValueError, match="Dimension mismatch"):
        inner_product(StateVector(1), StateVector(2))


def test_fidelity_ignores_global_phase() -> None:
    state = random_state(2)
    shifted = StateVector.from_amplitudes(a * Complex(0.0, 1.0) for a in state.amplitudes)
    assert fidelity(state, shifted) == pytest.approx(1.0)


def test_debug_context_restores_previous_value() -> None:
    before = is_debug_enabled()
    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    assert is_debug_enabled() == before


def test_set_debug_enabled() -> None:
    before = is_debug_enabled()
    try:
        set_debug_enabled(True)
        assert is_debug_enabled()
        set_debug_enabled(False)
        assert not is_debug_enabled()
    finally:
        set_debug_enabled(before)


def test_circuit_runs_cleanly_in_debug_mode() -> None:
    with debug_context(True):
        state = QuantumCircuit(3).h(0).cx(0, 1).ccx(0, 1, 2).rz(0.7, 2).cz(2, 0).run()
    assert state.norm() == pytest.approx(1.0)


def test_debug_mode_catches_norm_drift_and_restores_switch() -> None:
    before = is_debug_enabled()
    doubling = [[Complex(2.0, 0.0), Complex.zero()], [Complex.zero(), Complex(2.0, 0.0)]]
    with pytest.raises(ValueError):
        with debug_context(True):
            StateVector(1).apply_single_qubit_gate(doubling, 0)
    assert is_debug_enabled() == before

    with debug_context(False):
        state = StateVector(1)
        state.apply_single_qubit_gate(doubling, 0)
    assert state.norm() == pytest.approx(2.0)
