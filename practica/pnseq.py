"""Length-31 Gold pseudo-random sequence generator."""

from __future__ import annotations

from itertools import islice

NC = 1600
_STATE_BITS = 31


def _shift_x1(x1):
    new_bit = ((x1 >> 3) ^ x1) & 1
    return (x1 >> 1) | (new_bit << 30)


def _shift_x2(x2):
    new_bit = ((x2 >> 3) ^ (x2 >> 2) ^ (x2 >> 1) ^ x2) & 1
    return (x2 >> 1) | (new_bit << 30)


def _gold_bits(c_init):
    x1, x2 = 1, c_init
    for _ in range(NC - 1):
        x1 = _shift_x1(x1)
        x2 = _shift_x2(x2)
    while True:
        x1 = _shift_x1(x1)
        x2 = _shift_x2(x2)
        yield (x1 ^ x2) & 1


def make_sequence(length, c_init):
    """Return ``length`` bits of the Gold sequence seeded with ``c_init``."""
    if length < 0:
        raise ValueError("sequence length must not be negative")
    if not 0 <= c_init < 1 << _STATE_BITS:
        raise ValueError(f"c_init must fit in {_STATE_BITS} bits")
    return list(islice(_gold_bits(c_init), length))