"""Immutable complex number type used for statevector amplitudes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

SQRT2 = math.sqrt(2.0)
SQRT2_INV = 1.0 / SQRT2

DEFAULT_EPSILON = 1e-10


@dataclass(frozen=True, eq=False)
class Complex:
    """
    A complex number ``real + i*imag``.

    Every operation returns a new value. Equality is tolerance based
    (``DEFAULT_EPSILON``) because rotations and phases never produce
    bit-exact results, which also makes instances unhashable.

    Attributes
    ----------
    real:
        Real part.
    imag:
        Imaginary part.
    """

    real: float
    imag: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "Complex":
        """Return ``magnitude * (cos(phase) + i sin(phase))``."""
        return cls(magnitude * math.cos(phase), magnitude * math.sin(phase))

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Convert a Python ``complex`` (or real number)."""
        value = complex(value)
        return cls(value.real, value.imag)

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Complex":
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> "Complex":
        return cls(0.0, 1.0)

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imag + other.imag)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imag - other.imag)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def scale(self, scalar: float) -> "Complex":
        return Complex(self.real * scalar, self.imag * scalar)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def magnitude(self) -> float:
        return math.hypot(self.real, self.imag)

    def magnitude_squared(self) -> float:
        return self.real * self.real + self.imag * self.imag

    def phase(self) -> float:
        """Argument in radians, in ``(-pi, pi]``."""
        return math.atan2(self.imag, self.real)

    def normalize(self) -> "Complex":
        """Return the unit-magnitude value with the same phase (zero stays zero)."""
        mag = self.magnitude()
        if mag == 0.0:
            return Complex.zero()
        return Complex(self.real / mag, self.imag / mag)

    def equals(self, other: "Complex", epsilon: float = DEFAULT_EPSILON) -> bool:
        return (
            abs(self.real - other.real) < epsilon
            and abs(self.imag - other.imag) < epsilon
        )

    def __add__(self, other: Union["Complex", float, int]) -> "Complex":
        if isinstance(other, Complex):
            return self.add(other)
        if isinstance(other, (int, float)):
            return Complex(self.real + other, self.imag)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union["Complex", float, int]) -> "Complex":
        if isinstance(other, Complex):
            return self.subtract(other)
        if isinstance(other, (int, float)):
            return Complex(self.real - other, self.imag)
        return NotImplemented

    def __rsub__(self, other: Union[float, int]) -> "Complex":
        if isinstance(other, (int, float)):
            return Complex(other - self.real, -self.imag)
        return NotImplemented

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def __mul__(self, other: Union["Complex", float, int]) -> "Complex":
        if isinstance(other, Complex):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return self.magnitude()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.equals(other)
        if isinstance(other, (int, float, complex)):
            return self.equals(Complex.from_builtin(other))
        return NotImplemented

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        if self.imag == 0:
            return f"{self.real:.4f}"
        if self.real == 0:
            return f"{self.imag:.4f}i"
        sign = "+" if self.imag >= 0 else "-"
        return f"{self.real:.4f} {sign} {abs(self.imag):.4f}i"

    def to_latex(self) -> str:
        """Short rendering with three decimals; parts below 1e-10 are dropped."""
        if abs(self.imag) < DEFAULT_EPSILON:
            return f"{self.real:.3f}"
        if abs(self.real) < DEFAULT_EPSILON:
            return f"{self.imag:.3f}i"
        sign = "+" if self.imag >= 0 else "-"
        return f"{self.real:.3f} {sign} {abs(self.imag):.3f}i"


__all__ = ["Complex", "SQRT2", "SQRT2_INV", "DEFAULT_EPSILON"]
