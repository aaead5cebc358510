"""Locate ``spatialwriter.toml``.

Lookup order: the ``SPATIALWRITER_CONFIG`` environment variable, then
the start directory and each of its parents. An explicit ``--config``
path bypasses this module entirely (see ``SwSettings.from_cli``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "spatialwriter.toml"
CONFIG_ENV_VAR = "SPATIALWRITER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    When ``SPATIALWRITER_CONFIG`` is set it wins, even if the file it
    names does not exist: in that case no config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
