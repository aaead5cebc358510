"""SRID reference data loader.

Two packaged resources list the spatial reference systems whose axis
order is X-then-Y and Y-then-X respectively, one integer per line.
Either file can be replaced by an explicit path (``[reference]`` config).
"""

from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from spatialwriter.errors import UnavailableResourceError

logger = logging.getLogger(__name__)

SRID_XY_RESOURCE = "srs_id_XY.csv"
SRID_YX_RESOURCE = "srs_id_YX.csv"


def _packaged(name: str) -> Traversable:
    return resources.files("spatialwriter.infrastructure").joinpath("resources", name)


class SridLoader:
    """Load the XY and YX SRID lists.

    Args:
        xy_path: Override for the X-then-Y list. Packaged file when None.
        yx_path: Override for the Y-then-X list. Packaged file when None.
    """

    def __init__(self, xy_path: Path | None = None, yx_path: Path | None = None) -> None:
        self._xy_source: Traversable | Path = xy_path or _packaged(SRID_XY_RESOURCE)
        self._yx_source: Traversable | Path = yx_path or _packaged(SRID_YX_RESOURCE)

    def load_xy(self) -> frozenset[int]:
        """SRIDs for which the axis order is X then Y."""
        return self._load(self._xy_source)

    def load_yx(self) -> frozenset[int]:
        """SRIDs for which the axis order is Y then X."""
        return self._load(self._yx_source)

    @staticmethod
    def _load(source: Traversable | Path) -> frozenset[int]:
        """Read one SRID per line, skipping blank lines.

        Raises:
            UnavailableResourceError: If the file is missing, unreadable,
                or holds a line that is not an integer.
        """
        if not source.is_file():
            msg = f"The file {source} does not exist."
            raise UnavailableResourceError(msg)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"The file {source} is not readable."
            raise UnavailableResourceError(msg) from exc

        srids: set[int] = set()
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                srids.add(int(line))
            except ValueError as exc:
                msg = f"{source}:{lineno}: {line!r} is not an SRID"
                raise UnavailableResourceError(msg) from exc

        logger.debug("Loaded %d SRIDs from %s", len(srids), source)
        return frozenset(srids)
