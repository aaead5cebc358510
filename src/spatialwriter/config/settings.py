"""SwSettings: one frozen object for CLI flags, env vars and TOML.

Sources, strongest first:

1. keyword arguments (the CLI flags)
2. ``SPATIALWRITER_*`` environment variables, ``__`` for nested keys
   (``SPATIALWRITER_WRITER__DEFAULT_FORMAT=mysql``)
3. ``spatialwriter.toml``, found by :func:`find_config` or given with ``-c``
4. defaults baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from spatialwriter.config.discovery import find_config
from spatialwriter.config.models import PluginsConfig, ReferenceConfig, WriterConfig


def read_toml(path: Path | None) -> dict[str, Any]:
    """Parse *path*, or return an empty mapping when there is no file.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by an already located TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod with no access to the
# instance being built, so from_cli hands the TOML path over here.
_pending = threading.local()


class SwSettings(BaseSettings):
    """Resolved configuration for one CLI invocation.

    Attributes:
        root: Base for relative paths in the config: the directory of
            ``spatialwriter.toml``, or the working directory without one.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SPATIALWRITER_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    writer: WriterConfig = Field(default_factory=WriterConfig)
    reference: ReferenceConfig = Field(default_factory=ReferenceConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> SwSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist means "no config";
        it does not fall back to discovery.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(root)

        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_path = toml_path
        try:
            return cls(root=root, config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None

    def resolve_path(self, path: Path | None) -> Path | None:
        """Anchor a relative config path at :attr:`root`."""
        if path is None or path.is_absolute():
            return path
        return self.root / path
