"""Exception hierarchy for swagger-catalog.

All exceptions inherit from :class:`CatalogError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`swagger_catalog.exit_codes`. The CLI entry point in
:func:`swagger_catalog.app.main` catches ``CatalogError`` and exits with the
appropriate code; library callers simply treat any of these as "document
unusable".

Subclass hierarchy::

    CatalogError (exit 1)
    +-- InvalidUsageError           (exit 2)
    +-- SpecParseError              (exit 7)
    |   +-- SpecReferenceError      (exit 8)
    |       +-- InvalidReferenceFormat
    |       +-- InvalidReference
    +-- ConfigError                 (exit 1)
"""

from __future__ import annotations

from swagger_catalog.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_REFERENCE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class CatalogError(Exception):
    """Base exception for all swagger-catalog errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(CatalogError):
    """Raised for invalid CLI arguments or unknown operation selectors."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(CatalogError):
    """Raised when an API description cannot be loaded, parsed, or normalized."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class SpecReferenceError(SpecParseError):
    """Base class for ``$ref`` failures.

    Args:
        message: Human-readable error description.
        ref: The offending reference string.
    """

    exit_code = EXIT_INVALID_REFERENCE

    def __init__(self, message: str, ref: str):
        super().__init__(message)
        self.ref = ref


class InvalidReferenceFormat(SpecReferenceError):
    """Raised when a ``$ref`` is not a local fragment pointer of the form ``#/a/b``."""


class InvalidReference(SpecReferenceError):
    """Raised when a ``$ref`` does not point at an existing value in the document."""


class ConfigError(CatalogError):
    """Raised for unreadable or invalid configuration files."""

    exit_code = EXIT_GENERIC_FAILURE
