"""Conversion of read buffers and streams to and from plain dictionaries.

The dictionaries hold the bytes under ``"data"`` as a list of integers and the
number of valid bits under ``"bit_length"``, so they can be stored as JSON.
A trailing partial byte holds its bits as an integer in the low bits.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .bits import Endianness
from .readbuffer import BitReadBuffer
from .readstream import BitReadStream


def buffer_to_dict(buffer: BitReadBuffer) -> dict[str, Any]:
    """Describe ``buffer`` as a dictionary of its data and bit length."""
    bit_len = buffer.bit_len()
    full, rest = divmod(bit_len, 8)
    data = list(buffer.read_bytes(0, full))
    if rest:
        data.append(buffer.read_int(full * 8, rest))
    return {"data": data, "bit_length": bit_len}


def _parse(data: Mapping[str, Any], endianness: Endianness) -> BitReadBuffer:
    if not isinstance(data, Mapping):
        raise TypeError("serialized bit data must be a mapping")
    try:
        raw = data["data"]
        bit_length = data["bit_length"]
    except KeyError as err:
        raise ValueError(f"serialized bit data is missing the {err.args[0]!r} field") from None
    if not isinstance(bit_length, int) or isinstance(bit_length, bool) or bit_length < 0:
        raise ValueError("bit_length must be a non-negative integer")
    buffer = BitReadBuffer(bytes(raw), endianness)
    buffer.truncate(bit_length)
    return buffer


def buffer_from_dict(data: Mapping[str, Any], endianness: Endianness) -> BitReadBuffer:
    """Rebuild a buffer from a dictionary made by :func:`buffer_to_dict`.

    Raises :class:`~bitbuffer.errors.NotEnoughData` when the bit length is
    longer than the data.
    """
    return _parse(data, endianness)


def stream_to_dict(stream: BitReadStream) -> dict[str, Any]:
    """Describe the bits left in ``stream`` as a dictionary.

    The stream itself is not advanced.
    """
    source = stream.copy()
    data = list(source.read_bytes(source.bits_left() // 8))
    rest = source.bits_left()
    if rest:
        data.append(source.read_int(rest))
    return {"data": data, "bit_length": stream.bit_len()}


def stream_from_dict(data: Mapping[str, Any], endianness: Endianness) -> BitReadStream:
    """Rebuild a stream from a dictionary made by :func:`stream_to_dict`."""
    return BitReadStream(_parse(data, endianness))