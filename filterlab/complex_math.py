"""
Minimal complex-number value type for transfer function evaluation.

Complex values are immutable (real, imag) pairs. Every operation returns
a new value and none of them raise: division by a zero-magnitude divisor
returns the sentinel Complex(inf, inf) so that downstream magnitude and
dB calculations degrade instead of failing.
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Complex:
    """Immutable complex value."""
    real: float
    imag: float

    def __add__(self, other: 'Complex') -> 'Complex':
        return add(self, other)

    def __sub__(self, other: 'Complex') -> 'Complex':
        return subtract(self, other)

    def __mul__(self, other: 'Complex') -> 'Complex':
        return multiply(self, other)

    def __truediv__(self, other: 'Complex') -> 'Complex':
        return divide(self, other)

    def __abs__(self) -> float:
        return magnitude(self)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def as_dict(self) -> dict:
        return {'real': self.real, 'imag': self.imag}


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
J = Complex(0.0, 1.0)


def create(real: float, imag: float) -> Complex:
    return Complex(real, imag)


def from_python(value: complex) -> Complex:
    """Convert a Python/numpy complex scalar."""
    return Complex(float(value.real), float(value.imag))


def from_polar(mag: float, phase_rad: float) -> Complex:
    """Build a complex value from magnitude and phase (radians)."""
    # np.cos/np.sin return NaN for infinite phase where math.cos would raise
    with np.errstate(invalid='ignore'):
        return Complex(float(mag * np.cos(phase_rad)), float(mag * np.sin(phase_rad)))


def magnitude(c: Complex) -> float:
    return math.sqrt(c.real * c.real + c.imag * c.imag)


def phase(c: Complex) -> float:
    """Phase angle in radians, range (-π, π]."""
    return math.atan2(c.imag, c.real)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imag + b.imag)


def subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.real - b.real, a.imag - b.imag)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def divide(a: Complex, b: Complex) -> Complex:
    """
    Complex division a / b.

    Returns Complex(inf, inf) when b has zero magnitude.
    """
    denom = b.real * b.real + b.imag * b.imag
    if denom == 0:
        return Complex(math.inf, math.inf)
    return Complex(
        (a.real * b.real + a.imag * b.imag) / denom,
        (a.imag * b.real - a.real * b.imag) / denom,
    )


def scale(c: Complex, s: float) -> Complex:
    """Multiply by a real scalar."""
    return Complex(c.real * s, c.imag * s)


def conjugate(c: Complex) -> Complex:
    return Complex(c.real, -c.imag)
