"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, spatialwriter.toml only
contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator


class WriterConfig(BaseModel):
    """[writer] section."""

    model_config = {"frozen": True}

    default_format: str = "wkb"
    hex_uppercase: bool = True

    @field_validator("default_format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            msg = "default_format must not be empty"
            raise ValueError(msg)
        return value


class ReferenceConfig(BaseModel):
    """[reference] section: SRID axis order lists.

    Leave unset to use the lists shipped with the package.
    """

    model_config = {"frozen": True}

    xy_path: Path | None = None
    yx_path: Path | None = None

    @property
    def is_custom(self) -> bool:
        return self.xy_path is not None or self.yx_path is not None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
