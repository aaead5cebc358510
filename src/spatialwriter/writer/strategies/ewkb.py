"""PostGIS Extended WKB strategy.

Without an SRID (None or 0) the output is plain OGC WKB: every valid
WKB is also valid EWKB. With an SRID::

    [byte order: u8 = 1][type | 0x20000000: u32][srid: u32][coordinates]

Coordinates are written exactly as in WKB, X then Y whatever the SRID.
Z and M flags are never set.

See https://postgis.net/docs/using_postgis_dbmanagement.html#EWKB_EWKT
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spatialwriter.domain.types import EWKB_SRID_FLAG, BinaryFormat
from spatialwriter.writer.strategies.wkb import WkbBinaryStrategy

if TYPE_CHECKING:
    from spatialwriter.domain.geometry import Geometry
    from spatialwriter.writer.packing import BinaryBuffer


class EwkbBinaryStrategy(WkbBinaryStrategy):
    """Little-endian 2D EWKB.

    Multi* members go through the whole encoder again, so a member
    carrying its own SRID gets its own SRID header, as PostGIS writes it.
    """

    name = BinaryFormat.EWKB.value

    def _write(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        srid = getattr(geometry, "srid", None)
        if not srid:
            super()._write(buffer, geometry)
            return

        self._write_byte_order(buffer)
        buffer.write_uint32(self._type_code(geometry) | EWKB_SRID_FLAG)
        buffer.write_uint32(srid)
        self._write_coordinates(buffer, geometry)
