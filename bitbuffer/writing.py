"""Writing Python values to a bit write stream.

Values are written by type:

* objects implementing :class:`BitWrite` / :class:`BitWriteSized` write themselves;
* ``bool`` is a single bit;
* ``int`` is a 32 bit integer, or ``length`` bits when sized;
* ``float`` is a 64 bit IEEE 754 float;
* ``str`` is a null terminated UTF-8 string, or a zero padded string of
  ``length`` bytes when sized;
* ``bytes`` and ``bytearray`` are written byte for byte;
* a :class:`~bitbuffer.readstream.BitReadStream` has its remaining bits
  copied, or only the next ``length`` bits when sized;
* lists and tuples write their items in order, each with the same size when
  sized.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .readstream import BitReadStream

_INT_BITS = 32
_FLOAT_BITS = 64


class BitWrite(ABC):
    """A value that knows how to write itself to a stream."""

    @abstractmethod
    def write(self, stream: Any) -> None:
        """Write this value to ``stream``."""


class BitWriteSized(ABC):
    """A value that writes itself to a stream given a size.

    What the size means depends on the value: bits for integers, bytes for
    strings, and so on.
    """

    @abstractmethod
    def write_sized(self, stream: Any, length: int) -> None:
        """Write this value to ``stream`` using ``length`` as its size."""


def _check_int(value: int) -> None:
    if not -(1 << (_INT_BITS - 1)) <= value < (1 << _INT_BITS):
        raise OverflowError(f"{value} does not fit in {_INT_BITS} bits")


def write_value(stream: Any, value: Any) -> None:
    """Write ``value`` to ``stream`` without a configured size."""
    if isinstance(value, BitWrite):
        value.write(stream)
    elif isinstance(value, bool):
        stream.write_bool(value)
    elif isinstance(value, int):
        _check_int(value)
        stream.write_int(value, _INT_BITS, width=_INT_BITS)
    elif isinstance(value, float):
        stream.write_float(value, _FLOAT_BITS)
    elif isinstance(value, str):
        stream.write_string(value, None)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        stream.write_bytes(bytes(value))
    elif isinstance(value, BitReadStream):
        stream.write_bits(value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            write_value(stream, item)
    else:
        raise TypeError(f"cannot write a value of type {type(value).__name__}")


def write_sized_value(stream: Any, value: Any, length: int) -> None:
    """Write ``value`` to ``stream`` using ``length`` as its size."""
    if length < 0:
        raise ValueError("length must not be negative")
    if isinstance(value, BitWriteSized):
        value.write_sized(stream, length)
    elif isinstance(value, bool):
        raise TypeError("a bool cannot be written with a size")
    elif isinstance(value, int):
        stream.write_int(value, length, width=None)
    elif isinstance(value, str):
        stream.write_string(value, length)
    elif isinstance(value, BitReadStream):
        stream.write_bits(value.copy().read_bits(length))
    elif isinstance(value, (list, tuple)):
        for item in value:
            write_sized_value(stream, item, length)
    else:
        raise TypeError(f"cannot write a value of type {type(value).__name__} with a size")