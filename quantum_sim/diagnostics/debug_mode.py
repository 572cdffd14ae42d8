"""Process-wide switch for norm checking after every gate.

Starts from the ``QUANTUM_SIM_DEBUG`` environment variable (``1``, ``true``,
``yes`` or ``on``).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "QUANTUM_SIM_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """True while statevector gate methods assert unit norm after applying."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn per-gate norm checks on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set the norm-check switch for the duration of a ``with`` block.

    The previous setting is restored on exit, also when the block raises
    (for instance a ``ValueError`` from a check that found a drifted norm).

    >>> with debug_context():
    ...     QuantumCircuit(2).h(0).cx(0, 1).run()
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
