"""Sequential reading of bit sequences from a :class:`BitReadBuffer`."""

from __future__ import annotations

from .bits import Endianness
from .errors import IndexOutOfBounds, NotEnoughData, Utf8Error
from .readbuffer import BitReadBuffer


class BitReadStream:
    """Cursor over a :class:`BitReadBuffer` that advances as values are read.

    A stream may cover only part of its buffer: streams made by
    :meth:`read_bits` or :meth:`copy` start at a bit offset into the buffer,
    and all positions and lengths they report are relative to that start.
    A read that fails leaves the position unchanged.
    """

    __slots__ = ("_buffer", "_start", "_pos")

    def __init__(self, buffer: BitReadBuffer) -> None:
        self._buffer = buffer
        self._start = 0
        self._pos = 0

    @classmethod
    def _at(cls, buffer: BitReadBuffer, start: int, pos: int) -> BitReadStream:
        stream = cls(buffer)
        stream._start = start
        stream._pos = pos
        return stream

    @classmethod
    def from_bytes(
        cls, data: bytes | bytearray | memoryview, endianness: Endianness
    ) -> BitReadStream:
        """Create a stream reading ``data`` in the given bit order."""
        return cls(BitReadBuffer(data, endianness))

    @property
    def endianness(self) -> Endianness:
        """The bit order of the underlying buffer."""
        return self._buffer.endianness

    def read_bool(self) -> bool:
        """Read a single bit as a boolean."""
        value = self._buffer.read_bool(self._pos)
        self._pos += 1
        return value

    def read_int(self, count: int, signed: bool = False, width: int | None = None) -> int:
        """Read ``count`` bits as an integer, sign extended when ``signed``."""
        value = self._buffer.read_int(self._pos, count, signed, width)
        self._pos += count
        return value

    def read_float(self, size: int = 32) -> float:
        """Read an IEEE 754 float of ``size`` bits (32 or 64)."""
        value = self._buffer.read_float(self._pos, size)
        self._pos += size
        return value

    def read_bytes(self, byte_count: int) -> bytes:
        """Read ``byte_count`` whole bytes."""
        value = self._buffer.read_bytes(self._pos, byte_count)
        self._pos += byte_count * 8
        return value

    def read_string(self, byte_len: int | None = None) -> str:
        """Read a UTF-8 string of fixed byte length or up to a null byte.

        A null terminated string advances past its terminator.  On malformed
        UTF-8 the stream still advances over the bytes that were read.
        """
        max_length = self.bits_left() // 8
        try:
            result = self._buffer.read_string(self._pos, byte_len)
        except Utf8Error as err:
            if byte_len is not None:
                self._pos += byte_len * 8
            else:
                self._pos += min((err.length + 1) * 8, max_length * 8)
            raise Utf8Error(err.reason, min(err.length, max_length)) from err

        if byte_len is not None:
            read = byte_len * 8
        else:
            read = (len(result.encode("utf-8")) + 1) * 8

        # The buffer may extend past this stream, so the string is cut back to
        # the longest well-formed prefix that fits in what is left.
        if read > self.bits_left():
            kept: list[str] = []
            size = 0
            for char in result:
                char_len = len(char.encode("utf-8"))
                if size + char_len > max_length:
                    break
                kept.append(char)
                size += char_len
            self._pos += size * 8
            return "".join(kept)

        self._pos += read
        return result

    def read_bits(self, count: int) -> BitReadStream:
        """Read the next ``count`` bits as a stream of their own."""
        sub = self._buffer.sub_buffer(self._pos + count)
        result = self._at(sub, self._pos, self._pos)
        self._pos += count
        return result

    def skip_bits(self, count: int) -> None:
        """Advance the stream by ``count`` bits."""
        left = self.bits_left()
        if count > left:
            raise NotEnoughData(count, left)
        self._pos += count

    def align(self) -> int:
        """Skip to the next byte boundary and return the number of bits skipped."""
        rest = self._pos % 8
        if rest == 0:
            return 0
        self.skip_bits(8 - rest)
        return 8 - rest

    def set_pos(self, pos: int) -> None:
        """Move the stream to ``pos`` bits from its start."""
        if pos < 0:
            raise ValueError("position must not be negative")
        if pos > self.bit_len():
            raise IndexOutOfBounds(pos, self.bit_len())
        self._pos = pos + self._start

    def bit_len(self) -> int:
        """The length of the stream in bits."""
        return self._buffer.bit_len() - self._start

    def pos(self) -> int:
        """The current position in the stream."""
        return self._pos - self._start

    def bits_left(self) -> int:
        """The number of bits that remain to be read."""
        return self.bit_len() - self.pos()

    def check_read(self, count: int) -> bool:
        """Check that ``count`` bits can be read.

        Returns True when the read comes within 64 bits of the end of the
        stream and False when there is plenty of room; raises
        :class:`NotEnoughData` when the bits are not there.
        """
        left = self.bits_left()
        if left < count + 64:
            if left < count:
                raise NotEnoughData(count, left)
            return True
        return False

    def copy(self) -> BitReadStream:
        """Return a stream that starts at the current position of this one."""
        return self._at(self._buffer.copy(), self._pos, self._pos)

    def to_owned(self) -> BitReadStream:
        """Return an independent stream with the same start, position and length."""
        return self._at(self._buffer.copy(), self._start, self._pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitReadStream):
            return NotImplemented
        mine = self.copy()
        theirs = other.copy()
        mine.set_pos(0)
        theirs.set_pos(0)
        if mine.bits_left() != theirs.bits_left():
            return False
        while mine.bits_left() > 32:
            if mine.read_int(32) != theirs.read_int(32):
                return False
        rest = mine.bits_left()
        return mine.read_int(rest) == theirs.read_int(rest)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BitReadStream(pos={self.pos()}, bit_len={self.bit_len()}, "
            f"endianness={self.endianness.value})"
        )