import pytest

from bitbuffer.bits import Endianness
from bitbuffer.errors import NotEnoughData
from bitbuffer.readstream import BitReadStream
from bitbuffer.writing import BitWrite, BitWriteSized, write_sized_value, write_value


class RecordingStream:
    """Stand-in stream that records the calls made on it."""

    def __init__(self):
        self.calls = []

    def write_bool(self, value):
        self.calls.append(("bool", value))

    def write_int(self, value, count, width=None):
        self.calls.append(("int", value, count, width))

    def write_float(self, value, size=32):
        self.calls.append(("float", value, size))

    def write_bytes(self, data):
        self.calls.append(("bytes", data))

    def write_string(self, string, length=None):
        self.calls.append(("string", string, length))

    def write_bits(self, bits):
        self.calls.append(("bits", bits))


class Point(BitWrite):
    def __init__(self, x, flag):
        self.x = x
        self.flag = flag

    def write(self, stream):
        write_sized_value(stream, self.x, 15)
        write_value(stream, self.flag)


class Padded(BitWriteSized):
    def __init__(self, text):
        self.text = text

    def write_sized(self, stream, length):
        write_value(stream, True)
        write_sized_value(stream, self.text, length)


def test_bool_is_written_as_bool():
    stream = RecordingStream()
    write_value(stream, True)
    assert stream.calls == [("bool", True)]


def test_int_and_float_defaults():
    stream = RecordingStream()
    write_value(stream, -3)
    write_value(stream, 10.2)
    assert stream.calls == [("int", -3, 32, 32), ("float", 10.2, 64)]


def test_int_out_of_range():
    with pytest.raises(OverflowError):
        write_value(RecordingStream(), 1 << 40)


def test_string_and_bytes():
    stream = RecordingStream()
    write_value(stream, "Foobar")
    write_value(stream, b"\x00\x01")
    assert stream.calls == [("string", "Foobar", None), ("bytes", b"\x00\x01")]


def test_sequences_are_written_in_order():
    stream = RecordingStream()
    write_value(stream, (1, False))
    write_value(stream, ["asd", "foobar"])
    assert stream.calls == [
        ("int", 1, 32, 32),
        ("bool", False),
        ("string", "asd", None),
        ("string", "foobar", None),
    ]


def test_custom_bitwrite():
    stream = RecordingStream()
    write_value(stream, [Point(6789, True)])
    assert stream.calls == [("int", 6789, 15, None), ("bool", True)]


def test_custom_bitwrite_sized():
    stream = RecordingStream()
    write_sized_value(stream, Padded("asd"), 3)
    assert stream.calls == [("bool", True), ("string", "asd", 3)]


def test_sized_int_and_string():
    stream = RecordingStream()
    write_sized_value(stream, 5, 3)
    write_sized_value(stream, "fixed length1", 16)
    assert stream.calls == [("int", 5, 3, None), ("string", "fixed length1", 16)]


def test_sized_sequence_uses_same_length():
    stream = RecordingStream()
    write_sized_value(stream, [1, 2], 7)
    assert stream.calls == [("int", 1, 7, None), ("int", 2, 7, None)]


def test_read_stream_written_whole():
    source = BitReadStream.from_bytes(b"\xb5\x6a", Endianness.LITTLE)
    stream = RecordingStream()
    write_value(stream, source)
    assert stream.calls == [("bits", source)]


def test_read_stream_sized_takes_prefix():
    source = BitReadStream.from_bytes(b"\xb5\x6a", Endianness.LITTLE)
    stream = RecordingStream()
    write_sized_value(stream, source, 3)
    (kind, bits), = stream.calls
    assert kind == "bits"
    assert bits.bit_len() == 3
    assert bits.read_int(3) == 0b101
    assert source.pos() == 0


def test_read_stream_sized_too_long():
    source = BitReadStream.from_bytes(b"\xb5", Endianness.LITTLE)
    with pytest.raises(NotEnoughData):
        write_sized_value(RecordingStream(), source, 9)


def test_sized_bool_rejected():
    with pytest.raises(TypeError):
        write_sized_value(RecordingStream(), True, 1)


def test_unknown_type_rejected():
    with pytest.raises(TypeError):
        write_value(RecordingStream(), {"a": 1})


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        write_sized_value(RecordingStream(), 1, -1)