"""Assemble one normalized operation descriptor from a Swagger path item.

:func:`create_path_operation` resolves the references inside a single
operation node and derives the fields request-validation middleware needs:

* ``fullPath`` -- the document ``basePath`` joined with the path template.
* ``consumes`` / ``produces`` -- operation-level lists, falling back to the
  document-level ones.
* ``paramGroupSchemas`` -- one JSON object schema per parameter location
  (``header``, ``path``, ``query``, ``body``, ``formData``).
* ``responseSchemas`` -- body and header schemas per declared status code.

Precedence when the descriptor is built (later wins): path-level vendor
extensions, then the computed fields above, then the operation's own fields.
``operationId`` is renamed to ``id``.
"""

from __future__ import annotations

import logging
import posixpath
import re
from typing import Any, Optional

from swagger_catalog.exceptions import SpecParseError
from swagger_catalog.models import (
    EXTENSION_PREFIX,
    PARAM_GROUPS,
    HTTPMethod,
    OperationDescriptor,
)
from swagger_catalog.parser.resolver import resolve_refs

logger = logging.getLogger(__name__)

_SLASHES = re.compile(r"/+")


def create_path_operation(
    method: str,
    path: str,
    path_item: dict[str, Any],
    document: dict[str, Any],
    path_extensions: Optional[dict[str, Any]] = None,
) -> OperationDescriptor:
    """Build the descriptor for ``path_item[method]``.

    Args:
        method: Lower-case HTTP method name (or :class:`HTTPMethod`).
        path: The path template the item is declared under, e.g. ``/pets/{id}``.
        path_item: The path item holding the operation.
        document: The root document, used for ``$ref`` lookups, ``basePath``
            and the document-level ``consumes``/``produces``.
        path_extensions: Vendor extensions inherited from the path item.
            Collected from *path_item* when omitted.

    Returns:
        A new descriptor dict.  Neither *path_item* nor *document* is modified.

    Raises:
        SpecParseError: If *method* is not an HTTP method or the path item
            does not declare it as an object.
        InvalidReferenceFormat: On a non-local ``$ref`` inside the operation.
        InvalidReference: On a dangling ``$ref`` inside the operation.
    """
    try:
        method = HTTPMethod(method).value
    except ValueError:
        raise SpecParseError(f"Unsupported HTTP method: {method!r}") from None

    if path_extensions is None:
        path_extensions = get_extensions(path_item, EXTENSION_PREFIX)

    operation_info = resolve_refs(path_item.get(method), document)
    if not isinstance(operation_info, dict):
        raise SpecParseError(
            f"Operation {method.upper()} {path} must be an object "
            f"(got {type(operation_info).__name__})"
        )
    if operation_info.get("parameters") is None:
        operation_info["parameters"] = []
    if operation_info.get("responses") is None:
        operation_info["responses"] = {}

    operation: OperationDescriptor = {
        **path_extensions,
        "id": operation_info.get("operationId"),
        "path": path,
        "fullPath": _full_path(document.get("basePath"), path),
        "consumes": _operation_property("consumes", operation_info, document),
        "produces": _operation_property("produces", operation_info, document),
        "paramGroupSchemas": create_param_group_schemas(operation_info["parameters"]),
        "responseSchemas": create_response_schemas(operation_info["responses"]),
        "method": method,
        **operation_info,
    }
    operation.pop("operationId", None)

    logger.debug("Assembled %s %s (id=%s)", method.upper(), path, operation["id"])
    return operation


def get_extensions(node: dict[str, Any], prefix: str = EXTENSION_PREFIX) -> dict[str, Any]:
    """Return the vendor extension fields of *node*, values carried verbatim."""
    return {
        key: value
        for key, value in node.items()
        if isinstance(key, str) and key.startswith(prefix)
    }


def create_param_group_schemas(
    parameters: list[dict[str, Any]],
) -> dict[str, dict[str, Any]]:
    """Group parameters by location into JSON object schemas.

    Each schema maps parameter names to a shallow copy of the parameter
    and lists the required ones.  Locations without parameters are left out.

    Example::

        create_param_group_schemas([
            {"name": "id", "in": "path", "required": True},
            {"name": "q", "in": "query"},
        ])
        # {"path": {"type": "object", "properties": {"id": {...}}, "required": ["id"]},
        #  "query": {"type": "object", "properties": {"q": {...}}, "required": []}}
    """
    named: list[dict[str, Any]] = []
    for param in parameters:
        if isinstance(param, dict) and isinstance(param.get("name"), str):
            named.append(param)
        else:
            logger.warning("Skipping parameter without a name: %r", param)

    schemas: dict[str, dict[str, Any]] = {}
    for group in PARAM_GROUPS:
        params = [param for param in named if param.get("in") == group]
        if params:
            schemas[group] = _create_params_schema(params)
    return schemas


def _create_params_schema(params: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {param["name"]: dict(param) for param in params},
        "required": [param["name"] for param in params if param.get("required")],
    }


def create_response_schemas(
    responses: dict[Any, Any],
) -> dict[str, dict[str, Any]]:
    """Map each status code (or ``default``) to its body and header schemas.

    Status keys are stringified since YAML loads bare ``200`` as an integer.
    ``headersSchema`` is ``None`` when the response declares no headers.
    """
    schemas: dict[str, dict[str, Any]] = {}
    for status, response in responses.items():
        if not isinstance(response, dict):
            response = {}
        schemas[str(status)] = {
            "bodySchema": response.get("schema"),
            "headersSchema": _create_headers_schema(response.get("headers")),
        }
    return schemas


def _create_headers_schema(headers: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if headers is None:
        return None
    return {
        "type": "object",
        "properties": headers,
        "required": [
            name
            for name, header in headers.items()
            if isinstance(header, dict) and header.get("required")
        ],
    }


def _operation_property(
    prop: str, operation_info: dict[str, Any], document: dict[str, Any]
) -> Any:
    """Operation-level value when present and non-empty, else the document's."""
    value = operation_info.get(prop)
    return value if value else document.get(prop)


def _full_path(base_path: Optional[str], path: str) -> str:
    """Join *base_path* and *path*, then normalize like a POSIX path.

    Duplicate slashes collapse, ``.``/``..`` segments are resolved and a
    trailing slash is kept.
    """
    joined = _SLASHES.sub("/", f"/{base_path or '/'}/{path}")
    normalized = posixpath.normpath(joined)
    if joined.endswith("/") and normalized != "/":
        normalized += "/"
    return normalized
