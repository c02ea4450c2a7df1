from datakit.memory_dump import hex_dump, oct_dump

HEADER = "      00 01 02 03 04 05 06 07  08 09 0A 0B 0C 0D 0E 0F \n"


def test_hex_dump_of_128_counting_bytes():
    text = hex_dump(bytes(range(128)))
    lines = text.splitlines(keepends=True)
    assert lines[0] == HEADER
    assert len(lines) == 9
    assert lines[1] == "0000: 00 01 02 03 04 05 06 07  08 09 0A 0B 0C 0D 0E 0F \n"
    assert lines[8] == "0070: 70 71 72 73 74 75 76 77  78 79 7A 7B 7C 7D 7E 7F \n"


def test_hex_dump_partial_line():
    text = hex_dump(b"\x01\x02\x03")
    assert text == HEADER + "0000: 01 02 03 \n"


def test_empty_dump_is_header_only():
    assert hex_dump(b"") == HEADER
    assert oct_dump(b"") == HEADER


def test_oct_dump():
    text = oct_dump(bytes([0, 8, 255]))
    assert text == HEADER + "0000: 000 010 377 \n"


def test_oct_dump_gap_after_eighth_byte():
    line = oct_dump(bytes(range(9))).splitlines()[1]
    assert line == "0000: 000 001 002 003 004 005 006 007  010 "