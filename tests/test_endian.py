import struct
import sys

from datakit.endian import is_little_endian, reverse_bytes, to_big_endian


def test_is_little_endian_matches_host():
    assert is_little_endian() == (sys.byteorder == "little")


def test_reverse_bytes():
    assert reverse_bytes(b"\x01\x02\x03\x04") == b"\x04\x03\x02\x01"
    assert reverse_bytes(reverse_bytes(b"abcdef")) == b"abcdef"


def test_reverse_empty():
    assert reverse_bytes(b"") == b""


def test_float_pi_to_big_endian():
    native = struct.pack("=f", 3.14)
    assert to_big_endian(native) == bytes.fromhex("4048F5C3")


def test_double_to_big_endian():
    native = struct.pack("=d", 2.71828182845904)
    assert to_big_endian(native) == struct.pack(">d", 2.71828182845904)


def test_int_to_big_endian():
    native = struct.pack("=I", 0x01020304)
    assert to_big_endian(native) == b"\x01\x02\x03\x04"