"""Raw audio containers and the fixed 36-byte WAVE header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Optional

_WAVE_HEADER = struct.Struct("<4sI4s4sIHHIIHH")


@dataclass
class MusicRawHeader:
    """Header of raw audio: sampling rate, quantization bits, data length and flags."""

    sampling_rate: int = 44100
    quantization_rate: int = 8
    data_length: int = 0
    flags: int = 0x00000000


@dataclass
class MusicRaw:
    """Raw audio data with its header and descriptive information."""

    header: MusicRawHeader = field(default_factory=MusicRawHeader)
    data: bytes = b""
    file_name: Optional[str] = None
    author_name: Optional[str] = None
    date: Optional[str] = None
    comment: Optional[str] = None


@dataclass
class WaveHeader:
    """The RIFF and format-chunk fields at the start of a WAVE file."""

    riff_chunk_id: bytes = b"RIFF"
    riff_chunk_data_size: int = 0
    wave_type: bytes = b"WAVE"
    wave_chunk_id: bytes = b"fmt "
    wave_chunk_data_size: int = 16
    compression_code: int = 1
    number_of_channels: int = 1
    sample_rate: int = 44100
    average_bytes_per_second: int = 0
    block_align: int = 0
    significant_bits_per_sample: int = 8

    SIZE = _WAVE_HEADER.size

    @classmethod
    def parse(cls, data: bytes) -> "WaveHeader":
        """Read a header from the first 36 bytes of ``data``."""
        if len(data) < _WAVE_HEADER.size:
            raise ValueError(
                f"WAVE header needs {_WAVE_HEADER.size} bytes, got {len(data)}"
            )
        return cls(*_WAVE_HEADER.unpack_from(bytes(data)))

    def pack(self) -> bytes:
        """Return the 36-byte little-endian encoding of the header."""
        for name in ("riff_chunk_id", "wave_type", "wave_chunk_id"):
            if len(getattr(self, name)) != 4:
                raise ValueError(f"{name} must be exactly four bytes")
        try:
            return _WAVE_HEADER.pack(
                self.riff_chunk_id,
                self.riff_chunk_data_size,
                self.wave_type,
                self.wave_chunk_id,
                self.wave_chunk_data_size,
                self.compression_code,
                self.number_of_channels,
                self.sample_rate,
                self.average_bytes_per_second,
                self.block_align,
                self.significant_bits_per_sample,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc