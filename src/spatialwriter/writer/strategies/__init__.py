"""Binary encoding strategies."""

from spatialwriter.writer.strategies.base import BinaryStrategy
from spatialwriter.writer.strategies.ewkb import EwkbBinaryStrategy
from spatialwriter.writer.strategies.mysql import MySQLBinaryStrategy
from spatialwriter.writer.strategies.wkb import WkbBinaryStrategy

__all__ = [
    "BinaryStrategy",
    "EwkbBinaryStrategy",
    "MySQLBinaryStrategy",
    "WkbBinaryStrategy",
]
