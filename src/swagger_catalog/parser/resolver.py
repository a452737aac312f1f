"""Resolve local ``$ref`` JSON Reference pointers in Swagger documents.

Swagger 2.0 documents use ``$ref`` pointers (e.g.,
``{"$ref": "#/definitions/Pet"}``) to share parameters, responses, and
schemas.  This module walks a subtree of the document and builds a **new**
tree in which every reference node is replaced by the referenced value, with
the reference node's own sibling fields laid over it (local override wins).

Only **local** references (``#/...``) are supported.  Anything else raises
:class:`~swagger_catalog.exceptions.InvalidReferenceFormat`; a pointer that
leads nowhere raises :class:`~swagger_catalog.exceptions.InvalidReference`.

Each call keeps a memo keyed by node identity that maps every input node to
the output node built for it.  Reaching the same node twice -- through shared
substructure or a self-referential schema -- returns the node already built,
so shared input stays shared and recursive schemas come out as recursive
(cyclic) dicts instead of recursing forever.  The input document is never
mutated.

Public functions: :func:`resolve_refs` and :func:`resolve_ref`.
"""

from __future__ import annotations

import logging
from typing import Any

from swagger_catalog.exceptions import InvalidReference, InvalidReferenceFormat
from swagger_catalog.models import REF_KEY

logger = logging.getLogger(__name__)


def resolve_refs(node: Any, document: dict[str, Any]) -> Any:
    """Return *node* with every local ``$ref`` replaced by its merged target.

    Args:
        node: Any JSON-like value taken from (or shaped like) *document*.
        document: The root document that ``#/...`` pointers are walked from.

    Returns:
        The resolved value.  Scalars and ``None`` are returned as-is; every
        mapping and list is a fresh container.

    Raises:
        InvalidReferenceFormat: If a reference is not of the form ``#/a/b``.
        InvalidReference: If a reference points at a missing value, or a
            chain of references loops back on itself.

    Example::

        doc = {"definitions": {"T": {"a": 1, "b": 2}}}
        resolve_refs({"$ref": "#/definitions/T", "b": 3}, doc)
        # -> {"a": 1, "b": 3}
    """
    return _RefResolver(document).resolve(node)


def resolve_ref(ref: str, document: dict[str, Any]) -> Any:
    """Look up a single local reference string in *document*.

    Splits ``#/definitions/Pet`` into segments and walks the document by key
    lookup.  List values accept decimal segments as indices.

    Args:
        ref: The ``$ref`` string.
        document: The root document.

    Returns:
        The located value itself (not a copy).

    Raises:
        InvalidReferenceFormat: If the first segment is not ``#``.
        InvalidReference: If any segment does not resolve to a value.
    """
    segments = ref.split("/")
    if segments[0] != "#":
        raise InvalidReferenceFormat(
            f"Only local $refs in the format '#/path/to/ref' are supported: {ref}",
            ref=ref,
        )

    value: Any = document
    for segment in segments[1:]:
        value = _lookup(value, segment)
        if value is None:
            raise InvalidReference(f"Invalid schema reference: {ref}", ref=ref)
    return value


def _lookup(container: Any, segment: str) -> Any:
    """Return ``container[segment]`` or ``None`` when there is no such value."""
    if isinstance(container, dict):
        return container.get(segment)
    if isinstance(container, list) and segment.isdigit():
        index = int(segment)
        return container[index] if index < len(container) else None
    return None


def _is_reference(node: Any) -> bool:
    return isinstance(node, dict) and isinstance(node.get(REF_KEY), str)


class _RefResolver:
    """One resolution pass over a document.

    Args:
        document: The root document used for every pointer lookup.
    """

    def __init__(self, document: dict[str, Any]) -> None:
        self._document = document
        self._built: dict[int, Any] = {}

    def resolve(self, node: Any) -> Any:
        if not isinstance(node, (dict, list)):
            return node

        key = id(node)
        if key in self._built:
            return self._built[key]

        if isinstance(node, list):
            resolved_list: list[Any] = []
            self._built[key] = resolved_list
            resolved_list.extend(self.resolve(item) for item in node)
            return resolved_list

        source = node
        if _is_reference(node):
            source = self._dereference(node)
            if not isinstance(source, dict):
                resolved = self.resolve(source)
                self._built[key] = resolved
                return resolved

        # Registered before the fields are walked so cycles land here.
        resolved_dict: dict[str, Any] = {}
        self._built[key] = resolved_dict
        for name, value in source.items():
            resolved_dict[name] = self.resolve(value)
        return resolved_dict

    def _dereference(self, node: dict[str, Any]) -> Any:
        """Follow a reference (and any chained references) from *node*.

        Returns a new dict holding the final target's fields overlaid by the
        sibling fields of each reference node on the way, outermost last.
        When the final target is not a mapping it is returned unchanged.
        """
        chain: list[str] = []
        overrides: list[dict[str, Any]] = []
        current: Any = node
        while _is_reference(current):
            ref = current[REF_KEY]
            if ref in chain:
                raise InvalidReference(
                    f"Circular $ref chain: {' -> '.join(chain + [ref])}", ref=ref
                )
            chain.append(ref)
            overrides.append({k: v for k, v in current.items() if k != REF_KEY})
            current = resolve_ref(ref, self._document)

        logger.debug("Resolved %s", " -> ".join(chain))

        if not isinstance(current, dict):
            return current

        merged = dict(current)
        for layer in reversed(overrides):
            merged.update(layer)
        return merged
