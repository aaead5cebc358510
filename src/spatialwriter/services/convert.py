"""ConvertService: GeoJSON in, binary geometry out.

Wires settings, the strategy registry (with plugin strategies) and the
axis order reference data together, and maps library exceptions onto
ServiceError codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spatialwriter.domain.geojson import parse_geojson
from spatialwriter.errors import (
    SpatialWriterError,
    UnavailableResourceError,
    UnsupportedDimensionError,
    UnsupportedGeometryVariantError,
    UnsupportedTypeCodeError,
)
from spatialwriter.infrastructure.srid_loader import SridLoader
from spatialwriter.plugins.manager import PluginManager
from spatialwriter.services.result import ServiceResult
from spatialwriter.writer.axis_order import SpatialReferenceHelper, default_helper
from spatialwriter.writer.facade import Writer
from spatialwriter.writer.strategies.mysql import MySQLBinaryStrategy

if TYPE_CHECKING:
    from spatialwriter.config.settings import SwSettings
    from spatialwriter.writer.strategies.base import BinaryStrategy

logger = logging.getLogger(__name__)

ERROR_CODES: dict[type[SpatialWriterError], str] = {
    UnsupportedGeometryVariantError: "UNSUPPORTED_GEOMETRY",
    UnsupportedTypeCodeError: "UNSUPPORTED_TYPE_CODE",
    UnsupportedDimensionError: "UNSUPPORTED_DIMENSION",
    UnavailableResourceError: "RESOURCE_UNAVAILABLE",
}


def _error_code(exc: SpatialWriterError) -> str:
    for exc_type, code in ERROR_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return "CONVERSION_FAILED"


class ConvertService:
    """Convert GeoJSON geometries and answer axis order questions.

    Args:
        settings: Resolved settings. Code defaults when None.
        plugins: Plugin manager to use. When None, one is created and,
            unless ``[plugins] enabled = false``, entry points are loaded.
    """

    def __init__(
        self,
        settings: SwSettings | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        if settings is None:
            from spatialwriter.config.settings import SwSettings

            settings = SwSettings()
        self._settings = settings

        if plugins is None:
            plugins = PluginManager()
            if settings.plugins.enabled:
                plugins.discover_and_load()
        self._plugins = plugins
        self._reference: SpatialReferenceHelper | None = None

    @property
    def reference(self) -> SpatialReferenceHelper:
        """Axis order resolver honouring the ``[reference]`` section."""
        if self._reference is None:
            config = self._settings.reference
            if config.is_custom:
                loader = SridLoader(
                    xy_path=self._settings.resolve_path(config.xy_path),
                    yx_path=self._settings.resolve_path(config.yx_path),
                )
                self._reference = SpatialReferenceHelper(loader)
            else:
                self._reference = default_helper()
        return self._reference

    def create_strategy(self, name: str) -> BinaryStrategy:
        """Instantiate the strategy registered under *name*.

        Raises:
            KeyError: If no strategy is registered under *name*.
        """
        strategy_cls = self._plugins.registry.get(name)
        if issubclass(strategy_cls, MySQLBinaryStrategy):
            return strategy_cls(reference=self.reference)
        return strategy_cls()

    def convert(
        self,
        geojson: str,
        *,
        fmt: str | None = None,
        srid: int | None = None,
    ) -> ServiceResult:
        """Convert a GeoJSON geometry into the requested binary format."""
        op = "convert"
        fmt = fmt or self._settings.writer.default_format

        try:
            strategy = self.create_strategy(fmt)
        except KeyError as exc:
            return ServiceResult.failure(op, "UNKNOWN_FORMAT", str(exc.args[0]), format=fmt)

        try:
            geometry = parse_geojson(geojson, srid)
        except UnsupportedDimensionError as exc:
            return ServiceResult.failure(op, "UNSUPPORTED_DIMENSION", str(exc))
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc))

        try:
            blob = Writer(strategy).convert(geometry)
        except SpatialWriterError as exc:
            logger.debug("Conversion failed: %s", exc)
            return ServiceResult.failure(
                op, _error_code(exc), str(exc), format=strategy.name, type=str(geometry.type)
            )

        hex_value = blob.hex()
        if self._settings.writer.hex_uppercase:
            hex_value = hex_value.upper()

        warnings = self._plugins.notify_converted(
            binary_format=strategy.name,
            geometry_type=str(geometry.type),
            srid=geometry.srid,
            size=len(blob),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "format": strategy.name,
                "type": str(geometry.type),
                "srid": geometry.srid,
                "size": len(blob),
                "hex": hex_value,
            },
            warnings=warnings,
        )

    def axis_order(self, srid: int) -> ServiceResult:
        """Report the axis order MySQL uses for *srid*."""
        op = "axis_order"
        try:
            order = self.reference.get_axis_order(srid)
        except UnavailableResourceError as exc:
            return ServiceResult.failure(op, "RESOURCE_UNAVAILABLE", str(exc), srid=srid)
        return ServiceResult(ok=True, op=op, data={"srid": srid, "axis_order": str(order)})

    def list_formats(self) -> ServiceResult:
        """List every registered binary format."""
        return ServiceResult(
            ok=True,
            op="list_formats",
            data={
                "formats": self._plugins.registry.names(),
                "default": self._settings.writer.default_format,
            },
        )
