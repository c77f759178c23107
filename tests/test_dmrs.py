import cmath
import math

import pytest

from practica.dmrs import DMRSConfig, generate_dmrs

EXAMPLE = DMRSConfig(200, 2, 25, False, True, 15, 5, 0)


def _ratios(a, b):
    return [x / y for x, y in zip(a, b)]


@pytest.mark.parametrize("prb", [1, 2, 3, 25, 100])
def test_slot_lengths(prb):
    slots = generate_dmrs(DMRSConfig(cell_id=7, subframe=1, length_prb=prb))
    assert len(slots) == 2
    assert all(len(slot) == 12 * prb for slot in slots)


def test_example_config_unit_magnitude():
    slot0, slot1 = generate_dmrs(EXAMPLE)
    assert len(slot0) == len(slot1) == 300
    assert all(abs(abs(value) - 1.0) < 1e-9 for value in slot0 + slot1)


def test_deterministic():
    first = generate_dmrs(EXAMPLE)
    assert len(first) == 2
    assert all(len(slot) == 300 for slot in first)
    # A call with another configuration in between must not disturb the result.
    other = generate_dmrs(DMRSConfig(cell_id=9, subframe=5, length_prb=3))
    assert all(len(slot) == 36 for slot in other)
    assert generate_dmrs(EXAMPLE) == first


def test_single_prb_uses_phase_table():
    slot0, slot1 = generate_dmrs(DMRSConfig(cell_id=0, subframe=0, length_prb=1))
    expected = cmath.exp(-1j * math.pi / 4)
    assert abs(slot0[0] - expected) < 1e-9
    assert abs(slot1[0] - expected) < 1e-9


def test_two_prb_uses_phase_table():
    slot0, _ = generate_dmrs(DMRSConfig(cell_id=0, subframe=0, length_prb=2))
    assert abs(slot0[0] - cmath.exp(-1j * math.pi / 4)) < 1e-9


def test_zadoff_chu_starts_at_one():
    slot0, slot1 = generate_dmrs(EXAMPLE)
    assert abs(slot0[0] - 1) < 1e-9
    assert abs(slot1[0] - 1) < 1e-9


def test_zadoff_chu_repeats_with_constant_phase_step():
    # 25 PRBs use a root of length 293 extended cyclically to 300.
    slot0, _ = generate_dmrs(EXAMPLE)
    steps = [slot0[n + 293] / slot0[n] for n in range(7)]
    assert all(abs(step - steps[0]) < 1e-9 for step in steps)


def test_slots_share_base_sequence_without_hopping():
    config = DMRSConfig(cell_id=31, subframe=4, length_prb=6, group_assignment=3)
    slot0, slot1 = generate_dmrs(config)
    quotient = _ratios(slot1, slot0)
    assert abs(quotient[0] - 1) < 1e-9
    step = quotient[1] / quotient[0]
    assert all(abs(quotient[n + 1] / quotient[n] - step) < 1e-9 for n in range(len(quotient) - 1))


def test_half_turn_cyclic_shift_alternates_sign():
    base = DMRSConfig(cell_id=100, subframe=3, length_prb=4, cyclic_shift=0)
    shifted = DMRSConfig(cell_id=100, subframe=3, length_prb=4, cyclic_shift=4)
    for a, b in zip(generate_dmrs(shifted), generate_dmrs(base)):
        quotient = _ratios(a, b)
        assert all(abs(q - (-1) ** n) < 1e-9 for n, q in enumerate(quotient))


def test_sequence_hopping_rejected():
    with pytest.raises(ValueError):
        generate_dmrs(DMRSConfig(cell_id=1, subframe=0, length_prb=3, sequence_hopping=True))


@pytest.mark.parametrize(
    "config",
    [
        DMRSConfig(cell_id=0, subframe=0, length_prb=0),
        DMRSConfig(cell_id=0, subframe=0, length_prb=101),
        DMRSConfig(cell_id=0, subframe=10, length_prb=3),
        DMRSConfig(cell_id=-1, subframe=0, length_prb=3),
        DMRSConfig(cell_id=0, subframe=0, length_prb=3, cyclic_shift=8),
        DMRSConfig(cell_id=0, subframe=0, length_prb=3, cyclic_shift_dci0=8),
        DMRSConfig(cell_id=0, subframe=0, length_prb=3, group_assignment=30),
    ],
)
def test_invalid_config_rejected(config):
    with pytest.raises(ValueError):
        generate_dmrs(config)