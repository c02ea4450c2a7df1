"""Split IEEE 754 binary floating-point values into sign, exponent and fraction."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields


def _validate(record, widths) -> None:
    for field in fields(record):
        value = getattr(record, field.name)
        if not 0 <= value < (1 << widths[field.name]):
            raise ValueError(
                f"{field.name} must fit in {widths[field.name]} bits"
            )


@dataclass
class Binary32:
    """Fields of a single-precision value (1, 8 and 23 bits)."""

    sign: int = 0
    exponent: int = 128
    fraction: int = 0

    _WIDTHS = {"sign": 1, "exponent": 8, "fraction": 23}

    def __post_init__(self) -> None:
        _validate(self, self._WIDTHS)

    @classmethod
    def from_float(cls, value: float) -> "Binary32":
        """Split ``value`` rounded to single precision."""
        (bits,) = struct.unpack("<I", struct.pack("<f", value))
        return cls(bits >> 31, (bits >> 23) & 0xFF, bits & 0x7FFFFF)

    def to_float(self) -> float:
        """Reassemble the single-precision value."""
        _validate(self, self._WIDTHS)
        bits = (self.sign << 31) | (self.exponent << 23) | self.fraction
        return struct.unpack("<f", struct.pack("<I", bits))[0]


@dataclass
class Binary64:
    """Fields of a double-precision value (1, 11, 20 + 32 bits)."""

    sign: int = 0
    exponent: int = 1024
    fraction_high: int = 0
    fraction_low: int = 0

    _WIDTHS = {"sign": 1, "exponent": 11, "fraction_high": 20, "fraction_low": 32}

    def __post_init__(self) -> None:
        _validate(self, self._WIDTHS)

    @classmethod
    def from_float(cls, value: float) -> "Binary64":
        """Split a double."""
        (bits,) = struct.unpack("<Q", struct.pack("<d", value))
        return cls(
            bits >> 63,
            (bits >> 52) & 0x7FF,
            (bits >> 32) & 0xFFFFF,
            bits & 0xFFFFFFFF,
        )

    def to_float(self) -> float:
        """Reassemble the double."""
        _validate(self, self._WIDTHS)
        bits = (
            (self.sign << 63)
            | (self.exponent << 52)
            | (self.fraction_high << 32)
            | self.fraction_low
        )
        return struct.unpack("<d", struct.pack("<Q", bits))[0]


@dataclass
class Binary128:
    """Fields of a quadruple-precision value (1, 15, 48 + 64 bits)."""

    sign: int = 0
    exponent: int = 16384
    fraction_high: int = 0
    fraction_low: int = 0

    _WIDTHS = {"sign": 1, "exponent": 15, "fraction_high": 48, "fraction_low": 64}

    def __post_init__(self) -> None:
        _validate(self, self._WIDTHS)

    @classmethod
    def from_bits(cls, high: int, low: int) -> "Binary128":
        """Split the high and low 64-bit halves of a quadruple-precision value."""
        if not (0 <= high < 1 << 64 and 0 <= low < 1 << 64):
            raise ValueError("each half must fit in 64 bits")
        return cls(high >> 63, (high >> 48) & 0x7FFF, high & 0xFFFFFFFFFFFF, low)

    def to_bits(self) -> tuple[int, int]:
        """Return the high and low 64-bit halves."""
        _validate(self, self._WIDTHS)
        high = (self.sign << 63) | (self.exponent << 48) | self.fraction_high
        return high, self.fraction_low