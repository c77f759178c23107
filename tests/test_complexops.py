import pytest

from practica.complexops import mag_sqr, safe_divide, split_complex, to_complex


def test_to_complex_pairs_parts():
    values = to_complex([0.5, 1.0], [-0.25, -1.0])
    assert values == [complex(0.5, -0.25), complex(1.0, -1.0)]


def test_to_complex_rounds_to_single_precision():
    (value,) = to_complex([0.01], [-0.1])
    assert abs(value.real - 0.01) < 1e-8
    assert abs(value.imag + 0.1) < 1e-8
    # rounding again changes nothing
    assert to_complex([value.real], [value.imag]) == [value]


def test_round_trip_exact_values():
    real = [0.0, 0.5, -2.0, 1024.0]
    imag = [-0.0, 0.125, 3.0, -8.0]
    assert split_complex(to_complex(real, imag)) == (real, imag)


def test_round_trip_is_stable_after_first_conversion():
    real = [0.01, 0.02, 0.03, 0.04, 0.05, 0.06, 0.07, 0.08, 0.09, 1.00]
    imag = [-0.1, -0.2, -0.03, -0.04, -0.05, -0.06, -0.07, -0.08, -0.09, -1.00]
    first = to_complex(real, imag)
    again = to_complex(*split_complex(first))
    assert again == first
    assert len(first) == 10


def test_to_complex_length_mismatch():
    with pytest.raises(ValueError):
        to_complex([1.0, 2.0], [1.0])


def test_split_empty():
    assert split_complex([]) == ([], [])


def test_mag_sqr():
    assert mag_sqr(3 + 4j) == 25.0
    assert mag_sqr(0j) == 0.0


def test_mag_sqr_matches_abs():
    value = complex(1.5, -2.5)
    assert mag_sqr(value) == pytest.approx(abs(value) ** 2)


def test_safe_divide_by_zero_gives_zero():
    assert safe_divide(5 + 7j, 0j) == 0j


def test_safe_divide_inverts_multiplication():
    numerator = complex(2.0, -3.0)
    denominator = complex(0.5, 1.5)
    quotient = safe_divide(numerator, denominator)
    assert quotient * denominator == pytest.approx(numerator)


def test_safe_divide_self_is_one():
    value = complex(-4.0, 9.0)
    assert safe_divide(value, value) == pytest.approx(1 + 0j)