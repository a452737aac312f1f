"""Catalog commands -- ``operations``, ``show`` and ``info``.

Each command loads a Swagger document (file path, URL, or ``-`` for stdin),
normalizes it with the effective configuration, and prints the result:

* ``operations`` -- one table row per ``(path, method)`` pair.
* ``show`` -- the full descriptor of one operation, as JSON.
* ``info`` -- document-level facts (base path, media types, counts).
"""

from __future__ import annotations

from typing import Any

import typer

from swagger_catalog.exceptions import CatalogError, InvalidUsageError
from swagger_catalog.models import CatalogConfig, Document, OperationDescriptor
from swagger_catalog.output import debug, error, format_response, get_output


def _get_config(ctx: typer.Context) -> CatalogConfig:
    if ctx.obj and isinstance(ctx.obj.get("config"), CatalogConfig):
        return ctx.obj["config"]
    return CatalogConfig()


def _load(ctx: typer.Context, source: str) -> tuple[Document, list[OperationDescriptor]]:
    """Load *source* and build its catalog, exiting with the error's code on failure."""
    from swagger_catalog.parser.extractor import get_all_operations
    from swagger_catalog.spec import get_spec_sync

    config = _get_config(ctx)
    debug(f"Loading spec from {source}")
    try:
        document = get_spec_sync(source, config.default_base_path)
        operations = get_all_operations(document, config.extension_prefix)
    except CatalogError as exc:
        error(f"Failed to load spec: {exc}")
        raise typer.Exit(code=exc.exit_code) from None
    return document, operations


def find_operation(
    operations: list[OperationDescriptor], selector: str
) -> OperationDescriptor:
    """Pick an operation by id, or by ``"METHOD /path"`` (template or full path).

    Raises:
        InvalidUsageError: If nothing matches.
    """
    for op in operations:
        if op.get("id") == selector:
            return op

    method, _, path = selector.strip().partition(" ")
    method = method.lower()
    path = path.strip()
    for op in operations:
        if op["method"] == method and path in (op["path"], op["fullPath"]):
            return op

    raise InvalidUsageError(f"No operation matches '{selector}'")


def operations_command(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
) -> None:
    """List every operation in the catalog.

    Example::

        swagger-catalog operations petstore.yaml
        swagger-catalog --json operations https://example.com/swagger.json
    """
    document, operations = _load(ctx, spec)

    headers = ["Method", "Full Path", "Id", "Params", "Responses"]
    rows: list[list[str]] = []
    for op in operations:
        rows.append([
            op["method"].upper(),
            op["fullPath"],
            op.get("id") or "-",
            ", ".join(op["paramGroupSchemas"]) or "-",
            ", ".join(op["responseSchemas"]) or "-",
        ])

    title = (document.get("info") or {}).get("title") or "API"
    get_output().print_table(headers, rows, title=f"{title} -- Operations ({len(rows)})")


def show_command(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
    operation: str = typer.Argument(
        ..., help="Operation id, or 'METHOD /path' (e.g. 'get /pets/{petId}')."
    ),
) -> None:
    """Print the normalized descriptor of one operation.

    Recursive schemas are printed with ``{"$circular": true}`` where they
    refer back to themselves.
    """
    _, operations = _load(ctx, spec)
    try:
        op = find_operation(operations, operation)
    except InvalidUsageError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    format_response(op)


def info_command(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="Spec file path, URL, or '-' for stdin."),
) -> None:
    """Show document-level facts: base path, media types, counts."""
    document, operations = _load(ctx, spec)
    info = document.get("info") or {}

    data: dict[str, Any] = {
        "title": info.get("title", "-"),
        "version": info.get("version", "-"),
        "swagger": str(document.get("swagger", "-")),
        "basePath": document["basePath"],
        "consumes": document.get("consumes") or [],
        "produces": document.get("produces") or [],
        "paths": len(document.get("paths") or {}),
        "operations": len(operations),
    }
    format_response(data)
