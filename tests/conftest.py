"""Shared pytest fixtures and test helpers for spatialwriter tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from spatialwriter.infrastructure.srid_loader import SridLoader
from spatialwriter.writer.axis_order import SpatialReferenceHelper, reset_default_helper


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no SPATIALWRITER_* env vars.

    Also drops the process-wide axis order helper and restores the root
    logger, which the CLI reconfigures on every invocation.
    """
    for key in [k for k in os.environ if k.startswith("SPATIALWRITER_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_default_helper()

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    reset_default_helper()


def write_srid_list(path: Path, *srids: int) -> Path:
    """Write an SRID list file, one SRID per line."""
    path.write_text("".join(f"{srid}\n" for srid in srids), encoding="utf-8")
    return path


@pytest.fixture
def reference_files(tmp_path: Path) -> tuple[Path, Path]:
    """Small XY and YX reference lists: 7035 is XY, 4326 is YX, 9999 is both."""
    ref = tmp_path / "ref"
    ref.mkdir()
    xy = write_srid_list(ref / "xy.csv", 7035, 9999)
    yx = write_srid_list(ref / "yx.csv", 4326, 9999)
    return xy, yx


@pytest.fixture
def reference(reference_files: tuple[Path, Path]) -> SpatialReferenceHelper:
    """Axis order helper over the small reference lists."""
    xy, yx = reference_files
    return SpatialReferenceHelper(SridLoader(xy_path=xy, yx_path=yx))
