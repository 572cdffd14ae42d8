"""Norm and overlap checks for statevectors."""

from __future__ import annotations

import math
from typing import Iterable, Union

from quantum_sim.core.complex import Complex


def _amplitudes_of(state: Union[Iterable[Complex], object]) -> Iterable[Complex]:
    return getattr(state, "amplitudes", state)


def state_norm(state) -> float:
    """
    Compute the L2 norm of a statevector.

    Parameters
    ----------
    state:
        A ``StateVector`` or any iterable of ``Complex`` amplitudes.
    """
    return math.sqrt(sum(a.magnitude_squared() for a in _amplitudes_of(state)))


def assert_normalized(state, atol: float = 1e-9) -> None:
    """
    Assert that a statevector has norm ~1 within a tolerance.

    Raises
    ------
    ValueError
        If the norm is not finite or deviates from 1 by more than ``atol``.
    """
    norm = state_norm(state)
    if not math.isfinite(norm):
        raise ValueError("State norm is not finite.")
    if abs(norm - 1.0) > atol:
        raise ValueError(
            f"State is not normalized within tolerance {atol}. Norm found: {norm}"
        )


def inner_product(state_a, state_b) -> Complex:
    """Return <a|b> for two statevectors of equal dimension."""
    amps_a = list(_amplitudes_of(state_a))
    amps_b = list(_amplitudes_of(state_b))
    if len(amps_a) != len(amps_b):
        raise ValueError(
            f"Dimension mismatch: {len(amps_a)} vs {len(amps_b)}."
        )
    total = Complex.zero()
    for a, b in zip(amps_a, amps_b):
        total = total + a.conjugate() * b
    return total


def fidelity(state_a, state_b) -> float:
    """
    Fidelity ``|<a|b>|^2`` between two pure states.

    Insensitive to global phase, so it is the right comparison for circuits
    that differ only by such a phase.
    """
    return inner_product(state_a, state_b).magnitude_squared()
