"""swagger-catalog -- Flatten Swagger 2.0 documents into an operation catalog.

For every declared path and HTTP method the package produces a
self-contained descriptor: ``$ref`` pointers resolved, path-level vendor
extensions inherited, and JSON object schemas built per parameter location
and per response status.  Request-validation and routing middleware can use
the catalog directly instead of re-deriving it from the raw document.

Typical usage::

    from swagger_catalog import get_spec_sync, get_all_operations

    document = get_spec_sync("petstore.yaml")
    operations = get_all_operations(document)

Modules:
    spec: Load-and-normalize facade (sync and async).
    parser: Loader, ``$ref`` resolver, operation extractor and assembler.
    models: Enumerations, type aliases, and Pydantic config models.
    config: XDG-aware configuration resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    app: Typer command line.
"""

__version__ = "0.3.0"

from swagger_catalog.models import PARAM_GROUPS, ParamGroup  # noqa: E402
from swagger_catalog.parser import (  # noqa: E402
    create_path_operation,
    get_all_operations,
    resolve_refs,
)
from swagger_catalog.spec import (  # noqa: E402
    apply_defaults,
    get_operations,
    get_spec,
    get_spec_sync,
)

__all__ = [
    "PARAM_GROUPS",
    "ParamGroup",
    "__version__",
    "apply_defaults",
    "create_path_operation",
    "get_all_operations",
    "get_operations",
    "get_spec",
    "get_spec_sync",
    "resolve_refs",
]
