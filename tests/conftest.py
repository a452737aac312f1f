"""Shared test fixtures for swagger-catalog.

Provides the petstore fixture document (raw and on disk), config isolation,
and a reset of the global output state between tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from swagger_catalog.output import reset_output

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The manager caches sys.stdout/sys.stderr at creation time, which go
    stale once CliRunner restores the real streams.
    """
    yield
    reset_output()


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Load a fresh copy of the raw petstore Swagger 2.0 document."""
    with open(FIXTURES_DIR / "petstore_2.0.json") as f:
        return json.load(f)


@pytest.fixture
def petstore_path() -> Path:
    """Path of the petstore fixture on disk."""
    return FIXTURES_DIR / "petstore_2.0.json"


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME into tmp_path, clears SWAGGER_CATALOG_*
    variables and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory.
    """
    monkeypatch.setattr("swagger_catalog.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in [
        "SWAGGER_CATALOG_EXTENSION_PREFIX",
        "SWAGGER_CATALOG_BASE_PATH",
        "SWAGGER_CATALOG_FORMAT",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
