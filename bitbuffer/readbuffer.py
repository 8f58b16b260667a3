"""Random access reading of bit sequences from a byte buffer."""

from __future__ import annotations

import struct

from .bits import Endianness, get_bits, sign_extend
from .errors import IndexOutOfBounds, NotEnoughData, TooManyBits, Utf8Error

_FLOAT_FORMATS = {32: "f", 64: "d"}


class BitReadBuffer:
    """Buffer that reads integers of any bit length at any bit position.

    Bits are taken from each byte starting at the least significant bit for
    little endian buffers and at the most significant bit for big endian ones.
    """

    __slots__ = ("_data", "_bit_len", "endianness")

    def __init__(self, data: bytes | bytearray | memoryview, endianness: Endianness) -> None:
        self._data = bytes(data)
        self._bit_len = len(self._data) * 8
        self.endianness = endianness

    @classmethod
    def _view(cls, data: bytes, bit_len: int, endianness: Endianness) -> BitReadBuffer:
        buffer = cls.__new__(cls)
        buffer._data = data
        buffer._bit_len = bit_len
        buffer.endianness = endianness
        return buffer

    def bit_len(self) -> int:
        """The number of bits available in the buffer."""
        return self._bit_len

    def byte_len(self) -> int:
        """The number of bytes backing the buffer."""
        return len(self._data)

    def _check_range(self, position: int, count: int) -> None:
        if position < 0 or count < 0:
            raise ValueError("position and count must not be negative")
        if position + count > self._bit_len:
            if position > self._bit_len:
                raise IndexOutOfBounds(position, self._bit_len)
            raise NotEnoughData(count, self._bit_len - position)

    def _raw(self, position: int, count: int) -> int:
        """Read ``count`` bits, treating everything past the data as zero."""
        if count == 0:
            return 0
        start = position >> 3
        end = (position + count + 7) >> 3
        chunk = self._data[start:end]
        if len(chunk) < end - start:
            chunk += bytes(end - start - len(chunk))
        word = int.from_bytes(chunk, self.endianness.value)
        return get_bits(word, position & 7, count, (end - start) * 8, self.endianness)

    def read_bool(self, position: int) -> bool:
        """Read the bit at ``position`` as a boolean."""
        if position < 0:
            raise ValueError("position must not be negative")
        if position >= self._bit_len:
            raise NotEnoughData(1, 0)
        return self._raw(position, 1) == 1

    def read_int(
        self, position: int, count: int, signed: bool = False, width: int | None = None
    ) -> int:
        """Read ``count`` bits at ``position`` as an integer.

        ``width`` is the bit size of the integer type being read; asking for
        more bits than that raises :class:`TooManyBits`.  Signed values are
        sign extended from the top bit that was read.
        """
        if width is not None and count > width:
            raise TooManyBits(count, width)
        self._check_range(position, count)
        value = self._raw(position, count)
        return sign_extend(value, count) if signed else value

    def read_bytes(self, position: int, byte_count: int) -> bytes:
        """Read ``byte_count`` bytes starting at bit ``position``."""
        self._check_range(position, byte_count * 8)
        if position & 7 == 0:
            start = position >> 3
            return self._data[start:start + byte_count]
        value = self._raw(position, byte_count * 8)
        return value.to_bytes(byte_count, self.endianness.value)

    @staticmethod
    def _decode(raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise Utf8Error(err.reason, len(raw)) from err

    def read_string(self, position: int, byte_len: int | None = None) -> str:
        """Read a UTF-8 string.

        With ``byte_len`` a fixed number of bytes is read and trailing null
        bytes are stripped; without it the string runs up to a null byte.
        """
        if byte_len is not None:
            return self._decode(self.read_bytes(position, byte_len)).rstrip("\0")
        return self._decode(self._string_bytes(position))

    def _string_bytes(self, position: int) -> bytes:
        if position < 0:
            raise ValueError("position must not be negative")
        if position > self._bit_len:
            raise IndexOutOfBounds(position, self._bit_len)
        if position & 7 == 0:
            start = position >> 3
            end = self._data.find(0, start)
            return self._data[start:] if end == -1 else self._data[start:end]
        collected = bytearray()
        pos = position
        while True:
            if self.endianness.is_le():
                byte = self._raw(pos, 8)
            else:
                byte = self.read_int(pos, 8)
            if byte == 0:
                return bytes(collected)
            collected.append(byte)
            pos += 8

    def read_float(self, position: int, size: int = 32) -> float:
        """Read an IEEE 754 float of ``size`` bits (32 or 64)."""
        try:
            fmt = _FLOAT_FORMATS[size]
        except KeyError:
            raise ValueError(f"floats are 32 or 64 bits, not {size}") from None
        self._check_range(position, size)
        raw = self._raw(position, size).to_bytes(size // 8, "little")
        return struct.unpack("<" + fmt, raw)[0]

    def sub_buffer(self, bit_len: int) -> BitReadBuffer:
        """Return a buffer over the same data limited to ``bit_len`` bits."""
        if bit_len > self._bit_len:
            raise NotEnoughData(bit_len, self._bit_len)
        return self._view(self._data, bit_len, self.endianness)

    def truncate(self, bit_len: int) -> None:
        """Limit this buffer to ``bit_len`` bits."""
        if bit_len > self._bit_len:
            raise NotEnoughData(bit_len, self._bit_len)
        self._bit_len = bit_len

    def copy(self) -> BitReadBuffer:
        """Return an independent buffer with the same data and length."""
        return self._view(self._data, self._bit_len, self.endianness)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitReadBuffer):
            return NotImplemented
        if self.endianness is not other.endianness or self._bit_len != other._bit_len:
            return False
        if self._bit_len % 8 == 0:
            return self._data == other._data
        full, rest = divmod(self._bit_len, 8)
        if self._data[:full] != other._data[:full]:
            return False
        return self._raw(full * 8, rest) == other._raw(full * 8, rest)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitReadBuffer(bit_len={self._bit_len}, endianness={self.endianness.value})"