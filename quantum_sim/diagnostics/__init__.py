"""Diagnostics and debugging helpers."""

from .core import assert_normalized, fidelity, inner_product, state_norm
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled

__all__ = [
    "state_norm",
    "assert_normalized",
    "inner_product",
    "fidelity",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
