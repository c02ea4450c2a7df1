"""Formatted hexadecimal and octal dumps of byte data."""

from __future__ import annotations

LINE_LENGTH = 16


def _dump(data: bytes, cell: str) -> str:
    view = bytes(data)
    header = "      " + "".join(
        (" " if i == 8 else "") + f"{i:02X} " for i in range(LINE_LENGTH)
    )
    lines = [header]
    for offset in range(0, len(view), LINE_LENGTH):
        row = view[offset:offset + LINE_LENGTH]
        cells = "".join(
            (" " if i == 8 else "") + format(value, cell) + " "
            for i, value in enumerate(row)
        )
        lines.append(f"{offset:04X}: {cells}")
    return "".join(line + "\n" for line in lines)


def hex_dump(data: bytes) -> str:
    """Return a hexadecimal dump, sixteen bytes per line."""
    return _dump(data, "02X")


def oct_dump(data: bytes) -> str:
    """Return an octal dump, sixteen bytes per line."""
    return _dump(data, "03o")