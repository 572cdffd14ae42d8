"""Pytest configuration and shared fixtures for quantum-sim tests.

This module provides:
- A deterministic torch RNG fixture for measurement and sampling
- Small state-preparation helpers shared across test modules
"""

import os

import pytest
import torch

from quantum_sim.backend import StateVector
from quantum_sim.core import Complex


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    generator = torch.Generator()
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global torch RNG so helper code drawing from it is reproducible."""
    torch.manual_seed(_seed())


def random_state(n_qubits: int, seed: int = 1234) -> StateVector:
    """A normalized pseudo-random statevector."""
    gen = torch.Generator()
    gen.manual_seed(seed)
    dim = 2**n_qubits
    re = torch.randn(dim, generator=gen, dtype=torch.float64)
    im = torch.randn(dim, generator=gen, dtype=torch.float64)
    norm = torch.sqrt((re**2 + im**2).sum()).item()
    return StateVector.from_amplitudes(
        Complex(r / norm, i / norm) for r, i in zip(re.tolist(), im.tolist())
    )


def assert_states_close(a: StateVector, b: StateVector, atol: float = 1e-9) -> None:
    assert a.n_qubits == b.n_qubits
    for i, (x, y) in enumerate(zip(a.amplitudes, b.amplitudes)):
        assert x.equals(y, atol), f"amplitude {i}: {x} != {y}"
