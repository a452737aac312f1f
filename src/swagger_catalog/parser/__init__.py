"""Swagger document parser -- load, resolve ``$ref`` pointers, and build operations.

Typical usage::

    from swagger_catalog.parser import load_document, get_all_operations

    raw = load_document("petstore.yaml")
    operations = get_all_operations(raw)

Sub-modules:

* :mod:`~swagger_catalog.parser.loader` -- I/O layer (URL, file, stdin) plus
  format detection, blocking and async.
* :mod:`~swagger_catalog.parser.resolver` -- Recursive ``$ref`` resolution
  with identity-based cycle handling.
* :mod:`~swagger_catalog.parser.extractor` -- Walks the ``paths`` table.
* :mod:`~swagger_catalog.parser.assembler` -- Builds one operation
  descriptor with its parameter and response schemas.
"""

from swagger_catalog.parser.assembler import (
    create_param_group_schemas,
    create_path_operation,
    create_response_schemas,
    get_extensions,
)
from swagger_catalog.parser.extractor import get_all_operations
from swagger_catalog.parser.loader import load_document, load_document_async
from swagger_catalog.parser.resolver import resolve_ref, resolve_refs

__all__ = [
    "create_param_group_schemas",
    "create_path_operation",
    "create_response_schemas",
    "get_all_operations",
    "get_extensions",
    "load_document",
    "load_document_async",
    "resolve_ref",
    "resolve_refs",
]
