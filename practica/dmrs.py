"""Uplink shared-channel demodulation reference signal sequences."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from practica.pnseq import make_sequence

log = logging.getLogger(__name__)

SUBCARRIERS_PER_PRB = 12
MAX_PRB = 100
SLOTS_PER_FRAME = 20
SYMBOLS_PER_SLOT = 7
GROUPS = 30

_PRIMES = (
    0, 11, 23, 31, 47, 59, 71, 83, 89, 107, 113, 131, 139, 151, 167,
    179, 191, 199, 211, 227, 239, 251, 263, 271, 283, 293, 311, 317, 331, 347,
    359, 367, 383, 389, 401, 419, 431, 443, 449, 467, 479, 491, 503, 509, 523,
    523, 547, 563, 571, 587, 599, 607, 619, 631, 647, 659, 661, 683, 691, 701,
    719, 727, 743, 751, 761, 773, 787, 797, 811, 827, 839, 839, 863, 863, 887,
    887, 911, 919, 929, 947, 953, 971, 983, 991, 997, 1019, 1031, 1039, 1051, 1063,
    1069, 1091, 1103, 1109, 1123, 1129, 1151, 1163, 1171, 1187, 1193,
)

_DMRS_1 = (0, 2, 3, 4, 6, 8, 9, 10)
_DMRS_2 = (0, 6, 3, 4, 2, 8, 10, 9)

_PHI_1 = (
    (-1, 1, 3, -3, 3, 3, 1, 1, 3, 1, -3, 3),
    (1, 1, 3, 3, 3, -1, 1, -3, -3, 1, -3, 3),
    (1, 1, -3, -3, -3, -1, -3, -3, 1, -3, 1, -1),
    (-1, 1, 1, 1, 1, -1, -3, -3, 1, -3, 3, -1),
    (-1, 3, 1, -1, 1, -1, -3, -1, 1, -1, 1, 3),
    (1, -3, 3, -1, -1, 1, 1, -1, -1, 3, -3, 1),
    (-1, 3, -3, -3, -3, 3, 1, -1, 3, 3, -3, 1),
    (-3, -1, -1, -1, 1, -3, 3, -1, 1, -3, 3, 1),
    (1, -3, 3, 1, -1, -1, -1, 1, 1, 3, -1, 1),
    (1, -3, -1, 3, 3, -1, -3, 1, 1, 1, 1, 1),
    (-1, 3, -1, 1, 1, -3, -3, -1, -3, -3, 3, -1),
    (3, 1, -1, -1, 3, 3, -3, 1, 3, 1, 3, 3),
    (1, -3, 1, 1, -3, 1, 1, 1, -3, -3, -3, 1),
    (3, 3, -3, 3, -3, 1, 1, 3, -1, -3, 3, 3),
    (-3, 1, -1, -3, -1, 3, 1, 3, 3, 3, -1, 1),
    (3, -1, 1, -3, -1, -1, 1, 1, 3, 1, -1, -3),
    (1, 3, 1, -1, 1, 3, 3, 3, -1, -1, 3, -1),
    (-3, 1, 1, 3, -3, 3, -3, -3, 3, 1, 3, -1),
    (-3, 3, 1, 1, -3, 1, -3, -3, -1, -1, 1, -3),
    (-1, 3, 1, 3, 1, -1, -1, 3, -3, -1, -3, -1),
    (-1, -3, 1, 1, 1, 1, 3, 1, -1, 1, -3, -1),
    (-1, 3, -1, 1, -3, -3, -3, -3, -3, 1, -1, -3),
    (1, 1, -3, -3, -3, -3, -1, 3, -3, 1, -3, 3),
    (1, 1, -1, -3, -1, -3, 1, -1, 1, 3, -1, 1),
    (1, 1, 3, 1, 3, 3, -1, 1, -1, -3, -3, 1),
    (1, -3, 3, 3, 1, 3, 3, 1, -3, -1, -1, 3),
    (1, 3, -3, -3, 3, -3, 1, -1, -1, 3, -1, -3),
    (-3, -1, -3, -1, -3, 3, 1, -1, 1, 3, -3, -3),
    (-1, 3, -3, 3, -1, 3, 3, -3, 3, 3, -1, -1),
    (3, -3, -3, -1, -1, -3, -1, 3, -3, 3, 1, -1),
)

_PHI_2 = (
    (-1, 3, 1, -3, 3, -1, 1, 3, -3, 3, 1, 3, -3, 3, 1, 1, -1, 1, 3, -3, 3, -3, -1, -3),
    (-3, 3, -3, -3, -3, 1, -3, -3, 3, -1, 1, 1, 1, 3, 1, -1, 3, -3, -3, 1, 3, 1, 1, -3),
    (3, -1, 3, 3, 1, 1, -3, 3, 3, 3, 3, 1, -1, 3, -1, 1, 1, -1, -3, -1, -1, 1, 3, 3),
    (-1, -3, 1, 1, 3, -3, 1, 1, -3, -1, -1, 1, 3, 1, 3, 1, -1, 3, 1, 1, -3, -1, -3, -1),
    (-1, -1, -1, -3, -3, -1, 1, 1, 3, 3, -1, 3, -1, 1, -1, -3, 1, -1, -3, -3, 1, -3, -1, -1),
    (-3, 1, 1, 3, -1, 1, 3, 1, -3, 1, -3, 1, 1, -1, -1, 3, -1, -3, 3, -3, -3, -3, 1, 1),
    (1, 1, -1, -1, 3, -3, -3, 3, -3, 1, -1, -1, 1, -1, 1, 1, -1, -3, -1, 1, -1, 3, -1, -3),
    (-3, 3, 3, -1, -1, -3, -1, 3, 1, 3, 1, 3, 1, 1, -1, 3, 1, -1, 1, 3, -3, -1, -1, 1),
    (-3, 1, 3, -3, 1, -1, -3, 3, -3, 3, -1, -1, -1, -1, 1, -3, -3, -3, 1, -3, -3, -3, 1, -3),
    (1, 1, -3, 3, 3, -1, -3, -1, 3, -3, 3, 3, 3, -1, 1, 1, -3, 1, -1, 1, 1, -3, 1, 1),
    (-1, 1, -3, -3, 3, -1, 3, -1, -1, -3, -3, -3, -1, -3, -3, 1, -1, 1, 3, 3, -1, 1, -1, 3),
    (1, 3, 3, -3, -3, 1, 3, 1, -1, -3, -3, -3, 3, 3, -3, 3, 3, -1, -3, 3, -1, 1, -3, 1),
    (1, 3, 3, 1, 1, 1, -1, -1, 1, -3, 3, -1, 1, 1, -3, 3, 3, -1, -3, 3, -3, -1, -3, -1),
    (3, -1, -1, -1, -1, -3, -1, 3, 3, 1, -1, 1, 3, 3, 3, -1, 1, 1, -3, 1, 3, -1, -3, 3),
    (-3, -3, 3, 1, 3, 1, -3, 3, 1, 3, 1, 1, 3, 3, -1, -1, -3, 1, -3, -1, 3, 1, 1, 3),
    (-1, -1, 1, -3, 1, 3, -3, 1, -1, -3, -1, 3, 1, 3, 1, -1, -3, -3, -1, -1, -3, -3, -3, -1),
    (-1, -3, 3, -1, -1, -1, -1, 1, 1, -3, 3, 1, 3, 3, 1, -1, 1, -3, 1, -3, 1, 1, -3, -1),
    (1, 3, -1, 3, 3, -1, -3, 1, -1, -3, 3, 3, 3, -1, 1, 1, 3, -1, -3, -1, 3, -1, -1, -1),
    (1, 1, 1, 1, 1, -1, 3, -1, -3, 1, 1, 3, -3, 1, -3, -1, 1, 1, -3, -3, 3, 1, 1, -3),
    (1, 3, 3, 1, -1, -3, 3, -1, 3, 3, 3, -3, 1, -1, 1, -1, -3, -1, 1, 3, -1, 3, -3, -3),
    (-1, -3, 3, -3, -3, -3, -1, -1, -3, -1, -3, 3, 1, 3, -3, -1, 3, -1, 1, -1, 3, -3, 1, -1),
    (-3, -3, 1, 1, -1, 1, -1, 1, -1, 3, 1, -3, -1, 1, -1, 1, -1, -1, 3, 3, -3, -1, 1, -3),
    (-3, -1, -3, 3, 1, -1, -3, -1, -3, -3, 3, -3, 3, -3, -1, 1, 3, 1, -3, 1, 3, 3, -1, -3),
    (-1, -1, -1, -1, 3, 3, 3, 1, 3, 3, -3, 1, 3, -1, 3, -1, 3, 3, -3, 3, 1, -1, 3, 3),
    (1, -1, 3, 3, -1, -3, 3, -3, -1, -1, 3, -1, 3, -1, -1, 1, 1, 1, 1, -1, -1, -3, -1, 3),
    (1, -1, 1, -1, 3, -1, 3, 1, 1, -1, -1, -3, 1, 1, -3, 1, 3, -3, 1, 1, -3, -3, -1, -1),
    (-3, -1, 1, 3, 1, 1, -3, -1, -1, -3, 3, -3, 3, 1, -3, 3, -3, 1, -1, 1, -3, 1, 1, 1),
    (-1, -3, 3, 3, 1, 1, 3, -1, -3, -1, -1, -1, 3, 1, -3, -3, -1, 3, -3, -1, -3, -1, -3, -1),
    (-1, -3, -1, -1, 1, -3, -1, -1, 1, -1, -3, 1, 1, -3, 1, -3, -3, 3, 1, 1, -1, 3, -1, -1),
    (1, 1, -1, -1, -3, -1, 3, -1, 3, -1, 1, 3, 1, -1, 3, 1, 3, -3, -3, 1, -1, -1, 1, 3),
)


@dataclass(frozen=True)
class DMRSConfig:
    """Cell and user parameters that select a reference signal sequence."""

    cell_id: int
    subframe: int
    length_prb: int
    sequence_hopping: bool = False
    group_hopping: bool = False
    group_assignment: int = 0
    cyclic_shift: int = 0
    cyclic_shift_dci0: int = 0


def _check_range(name, value, low, high):
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


def _validate(config):
    _check_range("cell_id", config.cell_id, 0, 503)
    _check_range("subframe", config.subframe, 0, SLOTS_PER_FRAME // 2 - 1)
    _check_range("length_prb", config.length_prb, 1, MAX_PRB)
    _check_range("group_assignment", config.group_assignment, 0, GROUPS - 1)
    _check_range("cyclic_shift", config.cyclic_shift, 0, len(_DMRS_1) - 1)
    _check_range("cyclic_shift_dci0", config.cyclic_shift_dci0, 0, len(_DMRS_2) - 1)
    if config.sequence_hopping:
        raise ValueError("sequence hopping is not supported")


def _pn_word(bits, offset):
    """Eight bits read least significant first, as an integer."""
    return sum(bit << i for i, bit in enumerate(bits[offset : offset + 8]))


def _unit(phase):
    return complex(math.cos(phase), math.sin(phase))


def generate_dmrs(config):
    """Return the reference sequences of the two slots of the configured subframe."""
    _validate(config)
    length = config.length_prb * SUBCARRIERS_PER_PRB
    n_zc = _PRIMES[config.length_prb]
    n_dmrs = _DMRS_1[config.cyclic_shift] + _DMRS_2[config.cyclic_shift_dci0]

    fss_pusch = (config.cell_id % GROUPS + config.group_assignment) % GROUPS
    c_init = (config.cell_id // GROUPS) * 32 + fss_pusch
    pn = make_sequence(8 * SYMBOLS_PER_SLOT * SLOTS_PER_FRAME + 8, c_init)
    group_pn = (
        make_sequence(8 * SLOTS_PER_FRAME + 8, config.cell_id // GROUPS)
        if config.group_hopping
        else None
    )

    slots = []
    for n_s in (2 * config.subframe, 2 * config.subframe + 1):
        f_gh = _pn_word(group_pn, 8 * n_s) % GROUPS if group_pn is not None else 0
        u = (f_gh + fss_pusch) % GROUPS
        q_bar = n_zc * (u + 1) / 31
        q = math.floor(q_bar + 0.5)
        n_cs = (n_dmrs + _pn_word(pn, 8 * SYMBOLS_PER_SLOT * n_s)) % 12
        alpha = 2 * math.pi * n_cs / 12
        log.debug("slot %d: u=%d q_bar=%f q=%d alpha=%f", n_s, u, q_bar, q, alpha)

        if config.length_prb == 1:
            phases = [alpha * n + phi * math.pi / 4 for n, phi in enumerate(_PHI_1[u])]
        elif config.length_prb == 2:
            phases = [alpha * n + phi * math.pi / 4 for n, phi in enumerate(_PHI_2[u])]
        else:
            phases = [
                alpha * n - math.pi * q * m * (m + 1) / n_zc
                for n, m in ((n, n % n_zc) for n in range(length))
            ]
        slots.append([_unit(phase) for phase in phases])
    return tuple(slots)