"""Numeric process exit codes used by the ``swagger-catalog`` command line.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~swagger_catalog.exceptions.CatalogError` subclass.
CI scripts can inspect the exit code to tell a broken document apart from a
dangling ``$ref`` without parsing stderr.

Example::

    $ swagger-catalog operations api.yaml
    $ echo $?
    8   # EXIT_INVALID_REFERENCE -- a $ref points nowhere
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API description could not be read, parsed, or normalized."""

EXIT_INVALID_REFERENCE = 8
"""A ``$ref`` pointer is malformed or does not resolve inside the document."""
