"""Load Swagger documents from a URL, local file, or stdin.

This module handles all I/O for fetching raw API descriptions and converting
them into Python dictionaries.  Local files are parsed by extension:
``.yaml``/``.yml`` files as YAML, anything else as JSON.  URLs use the
response content type (then the URL suffix) as the hint, and stdin falls back
from JSON to YAML.

The public functions are:

* :func:`load_document` -- blocking load from any supported source.
* :func:`load_document_async` -- the same, awaiting only on the I/O step.

Neither applies defaults or resolves references; see
:mod:`swagger_catalog.spec` for that.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from swagger_catalog.exceptions import SpecParseError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")
_URL_TIMEOUT = 30.0


def load_document(source: str) -> dict[str, Any]:
    """Load an API description from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SpecParseError: If the source cannot be loaded or parsed.
    """
    if source == "-":
        return _parse_content(_read_stdin(), hint="")
    elif _is_url(source):
        return _load_from_url(source)
    else:
        content = _read_file(source)
        return _parse_content(content, hint=_hint_from_suffix(source))


async def load_document_async(source: str) -> dict[str, Any]:
    """Asynchronous counterpart of :func:`load_document`.

    URLs are fetched with :class:`httpx.AsyncClient`; file and stdin reads
    run in a worker thread.  Parsing happens on the event loop once the
    content is available.
    """
    if source == "-":
        content = await asyncio.to_thread(_read_stdin)
        return _parse_content(content, hint="")
    elif _is_url(source):
        return await _load_from_url_async(source)
    else:
        content = await asyncio.to_thread(_read_file, source)
        return _parse_content(content, hint=_hint_from_suffix(source))


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _hint_from_suffix(path: str) -> str:
    """Return 'yaml' for .yaml/.yml paths and 'json' for everything else."""
    return "yaml" if Path(path).suffix.lower() in _YAML_SUFFIXES else "json"


def _read_stdin() -> str:
    """Read all of stdin.

    Raises:
        SpecParseError: If stdin cannot be read or is empty.
    """
    try:
        content = sys.stdin.read()
    except Exception as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")
    return content


def _read_file(path: str) -> str:
    """Read a local document.

    Raises:
        SpecParseError: If the file is missing, unreadable, or empty.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read spec file {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Spec file is empty: {path}")

    logger.debug("Read %d characters from %s", len(content), path)
    return content


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch a document over HTTP(S).

    Raises:
        SpecParseError: If the URL cannot be fetched or content cannot be parsed.
    """
    try:
        response = httpx.get(url, timeout=_URL_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    return _parse_content(response.text, hint=_hint_from_response(url, response))


async def _load_from_url_async(url: str) -> dict[str, Any]:
    try:
        async with httpx.AsyncClient(
            timeout=_URL_TIMEOUT, follow_redirects=True
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    return _parse_content(response.text, hint=_hint_from_response(url, response))


def _hint_from_response(url: str, response: httpx.Response) -> str:
    """Pick a parse hint from the content type, then from the URL path suffix."""
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return "json"
    if "yaml" in content_type or "yml" in content_type:
        return "yaml"
    if Path(urlparse(url).path).suffix.lower() in _YAML_SUFFIXES:
        return "yaml"
    return ""


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    With ``hint='json'`` only JSON is attempted and with ``hint='yaml'`` only
    YAML.  Without a hint JSON is tried first, then YAML.

    Args:
        content: The raw string content.
        hint: Optional format hint ('json' or 'yaml').

    Returns:
        The parsed dictionary.

    Raises:
        SpecParseError: If the content cannot be parsed or is not a mapping.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        return _require_mapping(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        if hint == "yaml":
            raise SpecParseError(f"Invalid YAML: {exc}") from exc
        raise SpecParseError(
            "Failed to parse spec as JSON or YAML"
            f"\n  JSON error: {json_error}"
            f"\n  YAML error: {exc}"
        ) from exc


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Spec must be a JSON/YAML object (got {kind})")
    return result
