"""Conversions between paired real/imaginary arrays and single-precision complex values."""

from __future__ import annotations

from array import array


def _as_float32(values):
    """Round each value to the nearest single-precision float."""
    return list(array("f", values))


def to_complex(real, imag):
    """Combine real and imaginary parts into complex values of single precision."""
    real = list(real)
    imag = list(imag)
    if len(real) != len(imag):
        raise ValueError(
            f"real and imaginary parts differ in length: {len(real)} != {len(imag)}"
        )
    return [complex(re, im) for re, im in zip(_as_float32(real), _as_float32(imag))]


def split_complex(values):
    """Split complex values into a list of real parts and a list of imaginary parts."""
    numbers = [complex(value) for value in values]
    return [value.real for value in numbers], [value.imag for value in numbers]


def mag_sqr(value):
    """Squared magnitude of a complex value."""
    value = complex(value)
    return value.real * value.real + value.imag * value.imag


def safe_divide(numerator, denominator):
    """Complex quotient, or zero when the denominator has no magnitude."""
    if mag_sqr(denominator) > 0.0:
        return complex(numerator) / complex(denominator)
    return 0j