"""Error types raised by numbers-validator."""

from __future__ import annotations


class InvalidTypeError(TypeError):
    """Raised when an argument is not of the type or shape an operation expects."""


class DocumentError(ValueError):
    """Raised when a check document cannot be loaded or fails schema validation."""


class UnknownOperationError(ValueError):
    """Raised when an operation ID is not found in the registry."""
