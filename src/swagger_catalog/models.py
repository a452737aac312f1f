"""Shared types for swagger-catalog.

The models fall into two groups:

**Document vocabulary** -- the closed sets the normalizer filters against:
    :class:`HTTPMethod` and :class:`ParamGroup`, plus the ``Document`` and
    ``OperationDescriptor`` aliases. Documents and descriptors stay plain
    JSON-like dicts so they can be handed to JSON-Schema validators and
    serialised without conversion.

**Configuration models** -- Pydantic v2 models loaded from the user and
project config files: :class:`OutputConfig` and :class:`CatalogConfig`.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Document = dict[str, Any]
"""A parsed API description (the root mapping of a Swagger 2.0 document)."""

OperationDescriptor = dict[str, Any]
"""One normalized ``(path, method)`` entry of the operation catalog."""

REF_KEY = "$ref"
"""Key marking a JSON reference node."""

EXTENSION_PREFIX = "x-"
"""Prefix of vendor extension keys."""


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised as operation keys of a Swagger 2.0 path item.

    Matching is case-sensitive: only the lower-case values below are
    treated as operations.
    """

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"


class ParamGroup(str, enum.Enum):
    """Locations a request parameter can appear in, per the ``in`` field.

    The member order is the order in which parameter-group schemas are
    emitted.
    """

    HEADER = "header"
    PATH = "path"
    QUERY = "query"
    BODY = "body"
    FORM_DATA = "formData"


HTTP_METHODS = frozenset(m.value for m in HTTPMethod)
PARAM_GROUPS = tuple(g.value for g in ParamGroup)


# --- Configuration ---


class OutputConfig(BaseModel):
    """Default output format preferences for the CLI."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class CatalogConfig(BaseModel):
    """Effective configuration, persisted at ``~/.config/swagger-catalog/config.json``.

    Loaded by :func:`~swagger_catalog.config.load_global_config` and layered
    with project config and environment variables by
    :func:`~swagger_catalog.config.resolve_config`.
    """

    model_config = ConfigDict(extra="forbid")

    extension_prefix: str = Field(
        default=EXTENSION_PREFIX,
        description="Path-item keys with this prefix are inherited by every operation",
    )
    default_base_path: str = Field(
        default="/", description="basePath applied when the document declares none"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
