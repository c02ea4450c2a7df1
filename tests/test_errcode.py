import pytest

from datakit.errcode import (
    ListError,
    get_record_a,
    get_record_b,
    get_reserved,
    get_sign,
    make_code,
)


def test_decompose_listnull_code():
    code = 0x80001000
    assert get_sign(code) == 1
    assert get_reserved(code) == 0
    assert get_record_a(code) == 1
    assert get_record_b(code) == 0


def test_decompose_negative_signed_representation():
    code = 0x80001000 - (1 << 32)
    assert get_sign(code) == 1
    assert get_record_a(code) == 1
    assert get_record_b(code) == 0


def test_make_code_matches_list_errors():
    assert make_code(1, 0, 1, 0) == ListError.LISTNULL
    assert make_code(1, 0, 1, 1) == ListError.ALLOCNULL
    assert make_code(1, 0, 1, 2) == ListError.ACCESSNULL
    assert make_code(1, 0, 2, 0) == ListError.OUTOFRANGE
    assert make_code(1, 0, 0, 0) == ListError.ERROR
    assert make_code(0, 0, 0, 1) == ListError.UNDEFINED


@pytest.mark.parametrize(
    "fields",
    [(0, 0, 0, 0), (1, 0x7F, 0xFFF, 0xFFF), (0, 5, 17, 300), (1, 1, 1, 1)],
)
def test_round_trip(fields):
    code = make_code(*fields)
    assert (
        get_sign(code),
        get_reserved(code),
        get_record_a(code),
        get_record_b(code),
    ) == fields


def test_success_code_has_no_sign():
    assert get_sign(ListError.SUCCESS) == 0
    assert get_sign(ListError.OUTOFRANGE) == 1