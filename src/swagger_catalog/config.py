"""Configuration with XDG paths and precedence resolution.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.swagger-catalog/`` on macOS and Windows. See :func:`get_config_dir`.
* **Global config** -- a single :class:`~swagger_catalog.models.CatalogConfig`
  JSON file in the config directory.
* **Project config** -- an optional ``./swagger-catalog.json`` holding any
  subset of the same keys.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project config, and global config into the
  effective configuration.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from swagger_catalog.exceptions import ConfigError
from swagger_catalog.models import CatalogConfig

_APP_NAME = "swagger-catalog"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "swagger-catalog.json"

ENV_EXTENSION_PREFIX = "SWAGGER_CATALOG_EXTENSION_PREFIX"
ENV_BASE_PATH = "SWAGGER_CATALOG_BASE_PATH"
ENV_FORMAT = "SWAGGER_CATALOG_FORMAT"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory (not created).

    On Linux/BSD: ``$XDG_CONFIG_HOME/swagger-catalog/`` (default
    ``~/.config/swagger-catalog/``).  On macOS/Windows: ``~/.swagger-catalog/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".config"
        return base / _APP_NAME
    return Path.home() / f".{_APP_NAME}"


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


# --- Loading ---


def _read_json(path: Path, label: str) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid {label} at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {label} at {path}: expected a JSON object")
    return data


def load_global_config() -> CatalogConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~swagger_catalog.models.CatalogConfig`, or a
        default instance if the file does not exist.

    Raises:
        ConfigError: If the file exists but is invalid JSON or fails
            validation.
    """
    path = global_config_path()
    if not path.is_file():
        return CatalogConfig()
    data = _read_json(path, "global config")
    try:
        return CatalogConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./swagger-catalog.json``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    return _read_json(path, "project config")


# --- Precedence resolution ---


def resolve_config(cli_format: Optional[str] = None) -> CatalogConfig:
    """Resolve the effective configuration.

    Precedence (high to low):
        1. CLI flags (``cli_format``)
        2. Environment variables (``SWAGGER_CATALOG_EXTENSION_PREFIX``,
           ``SWAGGER_CATALOG_BASE_PATH``, ``SWAGGER_CATALOG_FORMAT``)
        3. Project config (``./swagger-catalog.json``)
        4. User config (``~/.config/swagger-catalog/config.json``)
        5. Defaults

    Raises:
        ConfigError: If any config layer is invalid.
    """
    merged = load_global_config().model_dump()

    project = load_project_config()
    if project is not None:
        project_output = project.get("output") or {}
        if not isinstance(project_output, dict):
            raise ConfigError("Invalid project config: 'output' must be an object")
        output = {**merged["output"], **project_output}
        merged.update(project)
        merged["output"] = output

    env_prefix = os.environ.get(ENV_EXTENSION_PREFIX)
    if env_prefix:
        merged["extension_prefix"] = env_prefix
    env_base_path = os.environ.get(ENV_BASE_PATH)
    if env_base_path:
        merged["default_base_path"] = env_base_path
    env_format = os.environ.get(ENV_FORMAT)
    if env_format:
        merged["output"]["format"] = env_format

    if cli_format is not None:
        merged["output"]["format"] = cli_format

    try:
        return CatalogConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
