"""Pluggy hook specifications for spatialwriter.

One setup-time hook lets plugins contribute binary strategies; one
lifecycle hook is called after every successful conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from spatialwriter.writer.strategies.base import BinaryStrategy

hookspec = pluggy.HookspecMarker("spatialwriter")
hookimpl = pluggy.HookimplMarker("spatialwriter")


class SpatialWriterHookSpec:
    """Hook specifications for the spatialwriter plugin system."""

    @hookspec
    def register_binary_strategies(self) -> dict[str, type[BinaryStrategy]] | None:
        """Return format name -> strategy class mappings to extend the registry."""

    @hookspec
    def post_convert(
        self,
        binary_format: str,
        geometry_type: str,
        srid: int | None,
        size: int,
    ) -> None:
        """Called after a geometry has been converted by the service layer."""
