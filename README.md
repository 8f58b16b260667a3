# bitbuffer

This package reads integers, floats, booleans, byte runs and UTF-8 strings at
any bit position. A value does not have to start on a byte boundary, and you
give the width of each integer in bits. It suits compact binary formats,
network protocols and packed game or demo files.

It supports two bit orderings, `Endianness.LITTLE` and `Endianness.BIG`, both
from `bitbuffer.bits`. With little endian, bits come out of each byte starting
at the least significant bit. With big endian, they start at the most
significant bit.

## Installation

```
pip install bitbuffer
```

The package uses only the Python standard library. It needs Python 3.10 or
later.

## Reading from a buffer

`bitbuffer.readbuffer.BitReadBuffer(data, endianness)` wraps a copy of some
bytes. You read values from it at absolute bit positions.

- `read_bool(position)` returns one bit as a boolean.
- `read_int(position, count, signed=False, width=None)` returns `count` bits
  as an integer.
  - When `signed` is true, the value is sign-extended from the top bit that
    was read.
  - When `width` is given and `count` exceeds it, `TooManyBits` is raised.
- `read_float(position, size=32)` returns an IEEE 754 float. `size` must be
  32 or 64.
- `read_bytes(position, byte_count)` returns whole bytes starting at any bit
  offset.
- `read_string(position, byte_len=None)` returns a UTF-8 string.
  - With `byte_len`, it reads that many bytes and strips trailing NUL bytes.
  - Without it, it reads up to the first NUL byte, or to the end of the data.
- `bit_len()` and `byte_len()` give the size of the buffer.
- `truncate(bit_len)` shortens the buffer in place.
- `sub_buffer(bit_len)` returns a shortened view of the same data.
- `copy()` returns an independent buffer.

Two buffers compare equal when they have the same bit order, the same bit
length and the same bits.

```python
from bitbuffer.bits import Endianness
from bitbuffer.readbuffer import BitReadBuffer

buffer = BitReadBuffer(bytes([0b1011_0101, 0b0110_1010]), Endianness.LITTLE)
buffer.read_int(0, 3)               # 0b101
buffer.read_int(0, 3, signed=True)  # -3
```

## Reading from a stream

`bitbuffer.readstream.BitReadStream(buffer)` keeps a cursor over a buffer and
moves it forward as it reads. `BitReadStream.from_bytes(data, endianness)`
builds the buffer for you.

The stream has the same read methods as the buffer, without the position
argument: `read_bool`, `read_int`, `read_float`, `read_bytes` and
`read_string`. A failed read does not move the cursor, with one exception:
a string that is not valid UTF-8 still moves the cursor past the bytes that
were read. A null-terminated string moves the cursor past its terminator.

The stream also offers these methods:

- `read_bits(count)` returns a sub-stream over the next `count` bits.
- `skip_bits(count)` moves the cursor forward by `count` bits.
- `align()` skips to the next byte boundary and returns how many bits it
  skipped.
- `set_pos(pos)` moves the cursor to `pos`.
- `pos()`, `bit_len()` and `bits_left()` report the position and length.
  These values are relative to the start of the stream.
- `check_read(count)` raises `NotEnoughData` if `count` bits are not
  available. Otherwise it returns `True` when the read lands within 64 bits
  of the end, and `False` when it does not.
- `copy()` returns a stream that starts at the current position.
- `to_owned()` returns an independent stream with the same start, position
  and length.

## Encoding values for writing

`bitbuffer.writing` chooses how to encode a Python value by looking at its
type:

- `write_value(stream, value)` encodes a value without a size.
- `write_sized_value(stream, value, length)` encodes a value with a size.

| Value type | `write_value` | `write_sized_value` |
| --- | --- | --- |
| `bool` | one bit | raises `TypeError` |
| `int` | 32-bit integer | `length` bits |
| `float` | 64-bit float | raises `TypeError` |
| `str` | null-terminated UTF-8 | zero-padded to `length` bytes |
| `bytes` / `bytearray` | byte for byte | raises `TypeError` |
| `BitReadStream` | its remaining bits | its next `length` bits |
| `list` / `tuple` | each item in order | each item in order, with the same `length` |

Your own classes can take part by implementing one or both of these abstract
base classes:

- `BitWrite` with a `write(stream)` method
- `BitWriteSized` with a `write_sized(stream, length)` method

## Serialization

`bitbuffer.serialize` converts buffers and streams to and from plain
dictionaries, which can be stored as JSON. Each dictionary has two keys:

- `"data"` holds the bytes as a list of integers.
- `"bit_length"` holds the number of valid bits.

The functions are `buffer_to_dict`, `buffer_from_dict`, `stream_to_dict` and
`stream_from_dict`. `stream_to_dict` does not move the stream's cursor.

## Low-level helpers

`bitbuffer.bits` provides three helpers:

- `get_bits(value, bit_offset, count, word_bits, endianness)` takes a run of
  bits out of a word.
- `sign_extend(value, count)` reads the low `count` bits as a two's
  complement number.
- `to_unsigned(value, count)` does the reverse.

## Errors

All errors are subclasses of `bitbuffer.errors.BitError`:

- `NotEnoughData` means a read or skip runs past the end of the data.
- `IndexOutOfBounds` means a position lies outside the buffer.
- `TooManyBits` means a bit count is larger than the requested integer width.
- `Utf8Error` means the bytes of a string are not valid UTF-8. Its `length`
  attribute is the number of bytes that were read.
- `StringTooLong` holds a string length and a requested fixed length.
  Nothing in the package raises it at present.

Negative positions and counts raise `ValueError`.

## What this package does not do

The package has no write stream or write buffer of its own. `write_value` and
`write_sized_value` only decide how to encode a value. They hand the actual
writing to the `stream` object you pass in. That object must provide these
methods:

- `write_bool`
- `write_int(value, count, width=...)`
- `write_float`
- `write_bytes`
- `write_string`
- `write_bits`

## Running the tests

```
pip install -e ".[test]"
pytest
```