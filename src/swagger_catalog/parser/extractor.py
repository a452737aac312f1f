"""Enumerate every ``(path, method)`` operation of a Swagger document.

This module walks the document's ``paths`` table and hands each declared
operation to :func:`~swagger_catalog.parser.assembler.create_path_operation`.
Vendor extensions declared on a path item (``x-...`` keys) are collected once
and inherited by every operation under that path.

Order follows the document: paths in insertion order, and methods in the
order they are declared inside each path item.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from swagger_catalog.models import EXTENSION_PREFIX, HTTP_METHODS, OperationDescriptor
from swagger_catalog.parser.assembler import create_path_operation, get_extensions

logger = logging.getLogger(__name__)


def get_all_operations(
    document: dict[str, Any],
    extension_prefix: str = EXTENSION_PREFIX,
) -> list[OperationDescriptor]:
    """Build the descriptor for every operation declared in *document*.

    Args:
        document: A parsed document, normally with defaults already applied
            by :func:`~swagger_catalog.spec.get_spec_sync`.
        extension_prefix: Prefix of path-level keys inherited by operations.

    Returns:
        A list of operation descriptors, one per path + HTTP method pair.

    Example::

        doc = get_spec_sync("petstore.yaml")
        for op in get_all_operations(doc):
            print(op["method"].upper(), op["fullPath"])
    """
    operations: list[OperationDescriptor] = []
    for path, path_item in _get_paths(document):
        extensions = get_extensions(path_item, extension_prefix)
        for method in _get_methods(path_item):
            operations.append(
                create_path_operation(method, path, path_item, document, extensions)
            )

    logger.debug("Extracted %d operations", len(operations))
    return operations


def _get_paths(document: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    paths = document.get("paths") or {}
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            logger.debug("Skipping non-object path item at %s", path)
            continue
        yield str(path), path_item


def _get_methods(path_item: dict[str, Any]) -> list[str]:
    """Operation keys of *path_item* in declaration order."""
    return [key for key in path_item if key in HTTP_METHODS]
