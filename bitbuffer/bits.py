"""Bit order and low level integer helpers shared by readers and writers."""

from __future__ import annotations

from enum import Enum


class Endianness(Enum):
    """Order in which bits are taken from each byte.

    The values double as the ``byteorder`` argument of ``int.from_bytes``.
    """

    LITTLE = "little"
    BIG = "big"

    def is_le(self) -> bool:
        """Return True for little endian bit order."""
        return self is Endianness.LITTLE


def _mask(count: int) -> int:
    return (1 << count) - 1


def get_bits(value: int, bit_offset: int, count: int, word_bits: int, endianness: Endianness) -> int:
    """Extract ``count`` bits starting ``bit_offset`` bits into a word.

    ``value`` is a word of ``word_bits`` bits that was assembled from bytes in
    the given endianness.  For little endian the offset counts from the least
    significant bit, for big endian from the most significant one.
    """
    if count < 0 or bit_offset < 0:
        raise ValueError("bit offset and count must not be negative")
    if bit_offset + count > word_bits:
        raise ValueError(
            f"cannot take {count} bits at offset {bit_offset} from a {word_bits} bit word"
        )
    if endianness.is_le():
        shifted = value >> bit_offset
    else:
        shifted = value >> (word_bits - bit_offset - count)
    return shifted & _mask(count)


def sign_extend(value: int, count: int) -> int:
    """Interpret the low ``count`` bits of ``value`` as a two's complement number."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return 0
    value &= _mask(count)
    if value >> (count - 1) & 1:
        return value - (1 << count)
    return value


def to_unsigned(value: int, count: int) -> int:
    """Return the ``count`` bit two's complement representation of ``value``."""
    if count < 0:
        raise ValueError("count must not be negative")
    return value & _mask(count)