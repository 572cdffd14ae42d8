"""Core numeric types."""

from .complex import DEFAULT_EPSILON, SQRT2, SQRT2_INV, Complex

__all__ = ["Complex", "SQRT2", "SQRT2_INV", "DEFAULT_EPSILON"]
