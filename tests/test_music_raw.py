import struct

import pytest

from datakit.music_raw import MusicRaw, MusicRawHeader, WaveHeader


def test_music_raw_defaults():
    music = MusicRaw()
    assert music.header.sampling_rate == 44100
    assert music.header.quantization_rate == 8
    assert music.header.data_length == 0
    assert music.header.flags == 0x00000000
    assert music.data == b""


def test_music_raw_headers_are_independent():
    first = MusicRaw()
    second = MusicRaw()
    first.header.data_length = 10
    assert second.header.data_length == 0
    assert second.header == MusicRawHeader()


def _sample_header() -> WaveHeader:
    return WaveHeader(
        riff_chunk_id=b"RIFF",
        riff_chunk_data_size=1000,
        wave_type=b"WAVE",
        wave_chunk_id=b"fmt ",
        wave_chunk_data_size=16,
        compression_code=1,
        number_of_channels=2,
        sample_rate=44100,
        average_bytes_per_second=176400,
        block_align=4,
        significant_bits_per_sample=16,
    )


def test_wave_header_round_trip():
    header = _sample_header()
    assert WaveHeader.parse(header.pack()) == header


def test_wave_header_size():
    assert len(_sample_header().pack()) == 36
    assert WaveHeader.SIZE == len(WaveHeader().pack())


def test_wave_header_wire_layout():
    packed = _sample_header().pack()
    assert packed[:4] == b"RIFF"
    assert packed[8:16] == b"WAVEfmt "
    assert struct.unpack_from("<I", packed, 24)[0] == 44100
    assert struct.unpack_from("<H", packed, 22)[0] == 2


def test_wave_header_parse_ignores_trailing_data():
    header = _sample_header()
    assert WaveHeader.parse(header.pack() + b"data") == header


def test_wave_header_parse_too_short():
    with pytest.raises(ValueError):
        WaveHeader.parse(b"RIFF")


def test_wave_header_pack_rejects_bad_id():
    with pytest.raises(ValueError):
        WaveHeader(riff_chunk_id=b"RIF").pack()


def test_wave_header_pack_rejects_overflow():
    with pytest.raises(ValueError):
        WaveHeader(number_of_channels=1 << 16).pack()