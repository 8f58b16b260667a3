"""Exceptions raised while reading or writing bit streams."""

from __future__ import annotations


class BitError(Exception):
    """Base class for every error raised by this package."""


class NotEnoughData(BitError):
    """More bits were requested than are left in the buffer."""

    def __init__(self, requested: int, bits_left: int) -> None:
        self.requested = requested
        self.bits_left = bits_left
        super().__init__(
            f"not enough data in the buffer to read all requested bits, "
            f"requested to read {requested} bits while only {bits_left} bits are left"
        )


class TooManyBits(BitError):
    """More bits were requested than fit in the target integer type."""

    def __init__(self, requested: int, max_bits: int) -> None:
        self.requested = requested
        self.max_bits = max_bits
        super().__init__(
            f"too many bits requested to fit in the requested data type, "
            f"requested to read {requested} bits while only {max_bits} fit in the datatype"
        )


class IndexOutOfBounds(BitError):
    """A position outside the buffer was requested."""

    def __init__(self, pos: int, size: int) -> None:
        self.pos = pos
        self.size = size
        super().__init__(
            f"the requested position is out of bounds, "
            f"requested position {pos} while the buffer is only {size} bits long"
        )


class Utf8Error(BitError):
    """The bytes read for a string are not valid UTF-8.

    ``length`` is the number of bytes that made up the malformed string.
    """

    def __init__(self, reason: object, length: int) -> None:
        self.reason = reason
        self.length = length
        super().__init__(f"the read data is not valid utf8 ({reason}), {length} bytes read")


class StringTooLong(BitError):
    """A string does not fit in the fixed length it is to be written in."""

    def __init__(self, string_length: int, requested_length: int) -> None:
        self.string_length = string_length
        self.requested_length = requested_length
        super().__init__(
            f"string of {string_length} bytes does not fit in the requested "
            f"fixed length of {requested_length} bytes"
        )