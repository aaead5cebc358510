"""Exceptions raised by spatialwriter.

Every error is raised before a writer hands back any bytes: a
conversion either returns the complete encoding or nothing.
"""

from __future__ import annotations


class SpatialWriterError(Exception):
    """Base class for all spatialwriter errors."""


class UnsupportedGeometryVariantError(SpatialWriterError):
    """The coordinate writer received a geometry it cannot encode.

    Raised for GeometryCollection and for any object outside the six
    supported geometry classes.
    """

    def __init__(self, type_name: str, strategy: str | None = None) -> None:
        self.type_name = type_name
        self.strategy = strategy
        if strategy:
            msg = f"{strategy} strategy does not support geometry class {type_name}"
        else:
            msg = f"Unsupported geometry class {type_name}"
        super().__init__(msg)


class UnsupportedTypeCodeError(SpatialWriterError):
    """A geometry type tag has no binary type code.

    It should not happen with the built-in geometries, but guards
    against a new type tag being added without a code.
    """

    def __init__(self, type_tag: object) -> None:
        self.type_tag = type_tag
        super().__init__(f"No binary type code for geometry type {type_tag!r}")


class UnsupportedDimensionError(SpatialWriterError, ValueError):
    """Z and/or M ordinates were supplied where only X and Y are supported."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "MySQL does not support Z nor M dimensions yet.")


class UnavailableResourceError(SpatialWriterError, OSError):
    """SRID reference data could not be loaded."""
