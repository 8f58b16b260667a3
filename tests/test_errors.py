import pytest

from bitbuffer.errors import (
    BitError,
    IndexOutOfBounds,
    NotEnoughData,
    StringTooLong,
    TooManyBits,
    Utf8Error,
)


def test_not_enough_data_fields():
    err = NotEnoughData(requested=5, bits_left=3)
    assert (err.requested, err.bits_left) == (5, 3)
    assert "5" in str(err) and "3" in str(err)


def test_too_many_bits_fields():
    err = TooManyBits(requested=9, max_bits=8)
    assert (err.requested, err.max_bits) == (9, 8)
    assert "9" in str(err)


def test_index_out_of_bounds_fields():
    err = IndexOutOfBounds(pos=70, size=64)
    assert (err.pos, err.size) == (70, 64)
    assert "70" in str(err) and "64" in str(err)


def test_utf8_error_fields_and_length_is_mutable():
    err = Utf8Error("invalid start byte", 4)
    assert err.reason == "invalid start byte"
    assert err.length == 4
    err.length = 2
    assert err.length == 2


def test_string_too_long_fields():
    err = StringTooLong(string_length=10, requested_length=4)
    assert (err.string_length, err.requested_length) == (10, 4)


@pytest.mark.parametrize(
    "err",
    [
        NotEnoughData(1, 0),
        TooManyBits(65, 64),
        IndexOutOfBounds(9, 8),
        Utf8Error("bad", 1),
        StringTooLong(3, 2),
    ],
)
def test_all_errors_are_bit_errors(err):
    with pytest.raises(BitError) as info:
        raise err
    assert info.value is err
    assert isinstance(info.value, Exception)