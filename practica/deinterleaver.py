"""Separation of data and control information on an uplink shared channel grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple

MAX_RBS = 100
SUBCARRIERS_PER_RB = 12
MAX_CONTROL_ROWS_PER_RB = 4

_BETA_ACK = (
    2.000, 2.500, 3.125, 4.000, 5.000, 6.250, 8.000, 10.000,
    12.625, 15.875, 20.000, 31.000, 50.000, 80.000, 126.000, -1,
)
_BETA_RI = (
    1.250, 1.625, 2.000, 2.500, 3.125, 4.000, 5.000, 6.250,
    8.000, 10.000, 12.625, 15.875, 20.000, -1, -1, -1,
)
_BETA_CQI = (
    -1, -1, 1.125, 1.250, 1.375, 1.625, 1.750, 2.000,
    2.250, 2.500, 2.875, 3.125, 3.500, 4.000, 5.000, 6.250,
)

_RI_COLUMNS = (1, 4, 7, 10)
_ACK_COLUMNS = (2, 3, 8, 9)


class Modulation(Enum):
    """Modulation of the shared channel."""

    BPSK = 0
    QPSK = 1
    QAM16 = 2
    QAM64 = 3

    @property
    def bits_per_symbol(self):
        """Number of coded bits carried by one resource element."""
        bits = {Modulation.QPSK: 2, Modulation.QAM16: 4, Modulation.QAM64: 6}
        try:
            return bits[self]
        except KeyError:
            raise ValueError(f"{self.name} is not used on the shared channel") from None


@dataclass(frozen=True)
class BetaIndex:
    """Offset indices selecting the beta factor of each control field."""

    ack: int = 0
    ri: int = 0
    cqi: int = 0

    def __post_init__(self):
        for name in ("ack", "ri", "cqi"):
            value = getattr(self, name)
            if not 0 <= value < 16:
                raise ValueError(f"beta index {name} must be between 0 and 15, got {value}")


@dataclass(frozen=True)
class ControlInfoBits:
    """Payload sizes, in bits, of the control fields."""

    ack: int = 0
    ri: int = 0
    cqi: int = 0

    def __post_init__(self):
        for name in ("ack", "ri", "cqi"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} bits must not be negative")


class ControlLengths(NamedTuple):
    """Coded lengths, in bits, of the control fields."""

    ack: int
    ri: int
    cqi: int


@dataclass
class DeinterleavedData:
    """Soft values split by the kind of information they carry."""

    data: list[float]
    cqi: list[float]
    ack: list[float]
    ri: list[float]


class _Cell(IntEnum):
    DATA = 0
    CQI = 1
    RI = 2
    ACK = 3
    CQI_ACK = 4


def _beta(table, index, bits, name):
    value = table[index]
    if value < 0 and bits > 0:
        raise ValueError(f"beta index {index} is reserved for {name}")
    return value


@dataclass
class ULSCHDeinterleaver:
    """Splits demodulated soft values of one subframe into data and control parts."""

    beta_index: BetaIndex
    control_bits: ControlInfoBits
    assigned_rbs: int
    srs: bool
    modulation: Modulation
    sum_kr: int
    llrs: tuple[float, ...]

    def __post_init__(self):
        if not 1 <= self.assigned_rbs <= MAX_RBS:
            raise ValueError(f"assigned_rbs must be between 1 and {MAX_RBS}")
        if self.sum_kr <= 0:
            raise ValueError("sum_kr must be positive")
        qm = self.modulation.bits_per_symbol
        self.llrs = tuple(float(value) for value in self.llrs)
        expected = self.rows * self.columns * qm
        if len(self.llrs) != expected:
            raise ValueError(f"expected {expected} soft values, got {len(self.llrs)}")

    @property
    def rows(self):
        """Subcarriers in the allocation."""
        return self.assigned_rbs * SUBCARRIERS_PER_RB

    @property
    def columns(self):
        """Data symbols in the subframe; one fewer when a sounding symbol is present."""
        return 11 if self.srs else 12

    def control_lengths(self):
        """Coded lengths of the acknowledgement, rank and channel quality fields."""
        qm = self.modulation.bits_per_symbol
        m, n = self.rows, self.columns
        bits = self.control_bits

        def symbols(payload, beta):
            return math.ceil(payload * m * n * beta / self.sum_kr)

        beta_ack = _beta(_BETA_ACK, self.beta_index.ack, bits.ack, "ACK")
        beta_ri = _beta(_BETA_RI, self.beta_index.ri, bits.ri, "RI")
        beta_cqi = _beta(_BETA_CQI, self.beta_index.cqi, bits.cqi, "CQI")

        limit = MAX_CONTROL_ROWS_PER_RB * m
        ack_symbols = min(symbols(bits.ack, beta_ack), limit)
        ri_symbols = min(symbols(bits.ri, beta_ri), limit)
        crc = 8 if bits.cqi > 11 else 0
        cqi_symbols = min(symbols(bits.cqi + crc, beta_cqi), m * n - ri_symbols)
        return ControlLengths(ack_symbols * qm, ri_symbols * qm, cqi_symbols * qm)

    def _symbol(self, row, column):
        qm = self.modulation.bits_per_symbol
        start = (column * self.rows + row) * qm
        return self.llrs[start : start + qm]

    def _place(self, grid, columns, count, kind):
        values = []
        slot = 0
        for i in range(count):
            column = columns[slot]
            row = self.rows - 1 - i // 4
            grid[row][column] = kind
            values.extend(self._symbol(row, column))
            slot = (slot + 3) % 4
        return values

    def deinterleave(self):
        """Return data, channel quality, acknowledgement and rank soft values."""
        qm = self.modulation.bits_per_symbol
        lengths = self.control_lengths()
        grid = [[_Cell.DATA] * self.columns for _ in range(self.rows)]

        ri = self._place(grid, _RI_COLUMNS, lengths.ri // qm, _Cell.RI)
        ack = self._place(grid, _ACK_COLUMNS, lengths.ack // qm, _Cell.ACK)

        remaining = lengths.cqi // qm
        for row in grid:
            if remaining == 0:
                break
            for column, kind in enumerate(row):
                if remaining == 0:
                    break
                if kind is _Cell.RI:
                    continue
                row[column] = _Cell.CQI_ACK if kind is _Cell.ACK else _Cell.CQI
                remaining -= 1

        data: list[float] = []
        cqi: list[float] = []
        punctured = [0.0] * qm
        for r, row in enumerate(grid):
            for c, kind in enumerate(row):
                if kind is _Cell.DATA:
                    data.extend(self._symbol(r, c))
                elif kind is _Cell.ACK:
                    data.extend(punctured)
                elif kind is _Cell.CQI:
                    cqi.extend(self._symbol(r, c))
                elif kind is _Cell.CQI_ACK:
                    cqi.extend(punctured)
        return DeinterleavedData(data, cqi, ack, ri)