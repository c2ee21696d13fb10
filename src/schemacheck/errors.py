"""
Exception hierarchy for schemacheck.

Only structural defects raise: malformed options, schemas, rules or helper
arguments. Data that fails validation is always reported inside the returned
ValidationResult, never as an exception.
"""

from typing import Any, Dict, Optional


class SchemaCheckError(Exception):
    """Base exception for all schemacheck errors."""

    def __init__(
        self,
        message: str,
        *,
        key: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.key = key
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(SchemaCheckError, ValueError):
    """Invalid options, logger, or arguments passed to a tree helper."""

    pass


class SchemaError(ConfigurationError):
    """A schema or rule that cannot be interpreted."""

    pass
