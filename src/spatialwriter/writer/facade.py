"""Writer: the main entry point of the library.

Holds one binary strategy and delegates every conversion to it::

    writer = Writer(MySQLBinaryStrategy())
    blob = writer.convert(Point(1, 2, srid=4326))
    writer.set_strategy(EwkbBinaryStrategy())

Not synchronized: swapping the strategy while another thread converts
is a race. Give each thread its own Writer, or never swap after
construction. Strategies themselves are stateless and can be shared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from spatialwriter.domain.geometry import Geometry
    from spatialwriter.writer.strategies.base import BinaryStrategy

logger = logging.getLogger(__name__)


class Writer:
    """Convert geometries with a swappable binary strategy."""

    def __init__(self, strategy: BinaryStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> BinaryStrategy:
        return self._strategy

    def convert(self, geometry: Geometry) -> bytes:
        """Encode *geometry* with the current strategy."""
        return self._strategy.execute_strategy(geometry)

    def get_strategy(self) -> BinaryStrategy:
        return self._strategy

    def set_strategy(self, strategy: BinaryStrategy) -> Self:
        """Replace the strategy and return this writer."""
        logger.debug("Writer strategy: %s -> %s", self._strategy.name, strategy.name)
        self._strategy = strategy
        return self
