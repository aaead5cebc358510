"""BinaryStrategy: abstract foundation for the binary encoders.

Each strategy turns a geometry into a complete byte string. The whole
tree is written into a private buffer first, so an error raised half
way through never leaves partial output behind.

Usage::

    class MyStrategy(BinaryStrategy):
        name = "mine"

        def _write(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, NoReturn

from spatialwriter.domain.types import LITTLE_ENDIAN, WKB_TYPE_CODES
from spatialwriter.errors import UnsupportedGeometryVariantError, UnsupportedTypeCodeError
from spatialwriter.writer.packing import BinaryBuffer

if TYPE_CHECKING:
    from spatialwriter.domain.geometry import Geometry


class BinaryStrategy(ABC):
    """Encode a geometry into one binary format."""

    name: ClassVar[str]

    def execute_strategy(self, geometry: Geometry) -> bytes:
        """Return the binary representation of *geometry*.

        Raises:
            UnsupportedTypeCodeError: If the geometry's type has no code.
            UnsupportedGeometryVariantError: If its coordinates cannot be written.
        """
        buffer = BinaryBuffer()
        self._write(buffer, geometry)
        return buffer.getvalue()

    @abstractmethod
    def _write(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        """Write the full encoding of *geometry*, header included."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    # ------------------------------------------------------------------
    # Shared header pieces
    # ------------------------------------------------------------------

    @staticmethod
    def _write_byte_order(buffer: BinaryBuffer) -> None:
        buffer.write_byte(LITTLE_ENDIAN)

    @staticmethod
    def _type_code(geometry: object) -> int:
        type_tag = getattr(geometry, "type", None)
        code = WKB_TYPE_CODES.get(type_tag)  # type: ignore[arg-type]
        if code is None:
            raise UnsupportedTypeCodeError(type_tag)
        return code

    def _unsupported(self, geometry: object) -> NoReturn:
        raise UnsupportedGeometryVariantError(type(geometry).__name__, self.name)
