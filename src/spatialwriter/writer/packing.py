"""Little-endian primitive packer.

Every binary format written here is little endian, so the byte order is
fixed in the struct formats rather than configurable.
"""

from __future__ import annotations

import struct

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")
_F64_PAIR = struct.Struct("<dd")


class BinaryBuffer:
    """Growable byte buffer with fixed-width writers.

    ``struct.error`` propagates for integers that do not fit.
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_byte(self, value: int) -> None:
        self._buffer += _U8.pack(value)

    def write_uint32(self, value: int) -> None:
        self._buffer += _U32.pack(value)

    def write_double(self, value: float) -> None:
        self._buffer += _F64.pack(value)

    def write_point(self, first: float, second: float) -> None:
        """Write two doubles, in the order given."""
        self._buffer += _F64_PAIR.pack(first, second)

    def extend(self, data: bytes) -> None:
        """Append already encoded bytes, such as a nested geometry."""
        self._buffer += data

    def getvalue(self) -> bytes:
        return bytes(self._buffer)
