"""Reading the file and info headers of Windows bitmap files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")
INFO_HEADER_SIZE = 40


class BitmapFormatError(ValueError):
    """Raised when a stream does not hold a supported bitmap header."""


def floord(value: float) -> int:
    """Truncate towards zero, then step down by one for negative values."""
    return int(value) - 1 if value < 0 else int(value)


@dataclass
class BitmapFileHeader:
    """The 14-byte file header."""

    type: int
    size: int
    reserved1: int
    reserved2: int
    image_offset: int


@dataclass
class BitmapInfoHeader:
    """The 40-byte info header."""

    header_size: int
    width: int
    height: int
    planes: int
    pixel_bit: int
    compression: int
    image_size: int
    x_resolution: int
    y_resolution: int
    color_index: int
    color_important: int


@dataclass
class Bitmap:
    """A bitmap's headers."""

    header: BitmapFileHeader
    info: BitmapInfoHeader

    def line_size(self) -> int:
        """Return the number of bytes in one padded row of pixels."""
        return floord((self.info.width * self.info.pixel_bit + 31) // 32) * 4

    def width(self) -> int:
        """Return the width in pixels."""
        return self.info.width

    def height(self) -> int:
        """Return the height in pixels."""
        return self.info.height

    def image_size(self) -> int:
        """Return the image data size recorded in the info header."""
        return self.info.image_size


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise BitmapFormatError("unexpected end of bitmap data")
    return data


def load_header(stream: BinaryIO) -> Bitmap:
    """Read the file header and a 40-byte info header from the start of ``stream``."""
    stream.seek(0)
    header = BitmapFileHeader(*_FILE_HEADER.unpack(_read_exact(stream, _FILE_HEADER.size)))
    info_bytes = _read_exact(stream, 4)
    (info_size,) = struct.unpack("<I", info_bytes)
    if info_size != INFO_HEADER_SIZE:
        raise BitmapFormatError(f"unsupported info header size {info_size}")
    info_bytes += _read_exact(stream, INFO_HEADER_SIZE - 4)
    info = BitmapInfoHeader(*_INFO_HEADER.unpack(info_bytes))
    return Bitmap(header, info)