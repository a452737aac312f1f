"""Public entry point: load a Swagger document and expose its operation catalog.

:func:`get_spec_sync` and :func:`get_spec` accept either a source string
(file path, URL, or ``-`` for stdin) or an already-parsed document, and
return the document with defaults applied.  Pass the result to
:func:`~swagger_catalog.parser.extractor.get_all_operations`, or use
:func:`get_operations` to do both in one call.

Example::

    from swagger_catalog import get_operations

    for op in get_operations("petstore.yaml"):
        print(op["id"], op["method"], op["fullPath"])
"""

from __future__ import annotations

import os
from typing import Any, Union

from swagger_catalog.exceptions import SpecParseError
from swagger_catalog.models import EXTENSION_PREFIX, Document, OperationDescriptor
from swagger_catalog.parser.extractor import get_all_operations
from swagger_catalog.parser.loader import load_document, load_document_async

SpecSource = Union[str, os.PathLike, Document]


def get_spec_sync(spec: SpecSource, default_base_path: str = "/") -> Document:
    """Load (when given a path) and normalize a document.

    Args:
        spec: A file path, URL, ``-`` for stdin, or a parsed document dict.
        default_base_path: ``basePath`` applied when the document has none.

    Returns:
        The document with defaults applied.  An in-memory document is
        updated in place and returned.

    Raises:
        SpecParseError: If the source cannot be loaded or is not a mapping.
    """
    if isinstance(spec, (str, os.PathLike)):
        spec = load_document(os.fspath(spec))
    return apply_defaults(_require_document(spec), default_base_path)


async def get_spec(spec: SpecSource, default_base_path: str = "/") -> Document:
    """Asynchronous counterpart of :func:`get_spec_sync`.

    Only the load step awaits; applying defaults is synchronous.
    """
    if isinstance(spec, (str, os.PathLike)):
        spec = await load_document_async(os.fspath(spec))
    return apply_defaults(_require_document(spec), default_base_path)


def apply_defaults(document: Document, default_base_path: str = "/") -> Document:
    """Set ``basePath`` when it is absent or empty, and return *document*."""
    if not document.get("basePath"):
        document["basePath"] = default_base_path
    return document


def get_operations(
    spec: SpecSource,
    default_base_path: str = "/",
    extension_prefix: str = EXTENSION_PREFIX,
) -> list[OperationDescriptor]:
    """Load *spec* and return its full operation catalog."""
    document = get_spec_sync(spec, default_base_path)
    return get_all_operations(document, extension_prefix)


def _require_document(spec: Any) -> Document:
    if not isinstance(spec, dict):
        raise SpecParseError(
            f"Spec must be a mapping (got {type(spec).__name__})"
        )
    return spec
