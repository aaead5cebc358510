"""Axis order resolution by SRID.

Each spatial reference system declares whether coordinates are written
X then Y or Y then X (latitude first for most geographic systems).
The reference lists are read once, on the first SRID that needs them,
and are immutable afterwards.

INVARIANT: an SRID listed in both tables resolves to XY (XY is checked first).
"""

from __future__ import annotations

import logging
import threading

from spatialwriter.domain.types import AxisOrder
from spatialwriter.infrastructure.srid_loader import SridLoader

logger = logging.getLogger(__name__)

DEFAULT_AXIS_ORDER = AxisOrder.XY


class SpatialReferenceHelper:
    """Resolve the axis order of an SRID from XY/YX reference sets.

    Loading is lazy and guarded by a lock, so concurrent first calls
    read the reference files once. A failed load is not cached: the
    error propagates and the next call tries again.
    """

    def __init__(self, loader: SridLoader | None = None) -> None:
        self._loader = loader or SridLoader()
        self._lock = threading.Lock()
        self._tables: tuple[frozenset[int], frozenset[int]] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._tables is not None

    def _load(self) -> tuple[frozenset[int], frozenset[int]]:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            if self._tables is None:
                xy_srids = self._loader.load_xy()
                yx_srids = self._loader.load_yx()
                self._tables = (xy_srids, yx_srids)
                logger.debug(
                    "SRID reference tables loaded: %d XY, %d YX", len(xy_srids), len(yx_srids)
                )
            return self._tables

    def get_axis_order(self, srid: int | None) -> AxisOrder:
        """Return the axis order for *srid*.

        ``None`` and ``0`` never touch the reference data.

        Raises:
            UnavailableResourceError: If the reference data cannot be loaded.
        """
        if not srid:
            return DEFAULT_AXIS_ORDER

        xy_srids, yx_srids = self._load()
        if srid in xy_srids:
            return AxisOrder.XY
        if srid in yx_srids:
            return AxisOrder.YX
        return DEFAULT_AXIS_ORDER


_default_helper: SpatialReferenceHelper | None = None
_default_lock = threading.Lock()


def default_helper() -> SpatialReferenceHelper:
    """Process-wide helper backed by the packaged reference files."""
    global _default_helper
    helper = _default_helper
    if helper is None:
        with _default_lock:
            if _default_helper is None:
                _default_helper = SpatialReferenceHelper()
            helper = _default_helper
    return helper


def reset_default_helper() -> None:
    """Drop the process-wide helper so the next call reloads (tests only)."""
    global _default_helper
    with _default_lock:
        _default_helper = None


def get_axis_order(srid: int | None) -> AxisOrder:
    """Resolve *srid* with the process-wide helper."""
    return default_helper().get_axis_order(srid)
