"""
schemacheck - Schema-driven validation of nested records

Declare a schema of predicate tuples, validate any nested record against it,
and get back a result tree of per-property and whole-object errors.
"""

__version__ = "0.1.0"

import sys

if sys.version_info < (3, 10):
    raise RuntimeError("schemacheck requires Python 3.10 or higher")

from .config import (
    AdditionalPropsOptions,
    InvalidObjectOptions,
    ValidationOptions,
    resolve_options,
)
from .errors import ConfigurationError, SchemaCheckError, SchemaError
from .formatters import error_per_message, error_per_property
from .schemas.base import ValidationResult
from .tracing import TraceEvent, noop_logger, structlog_logger
from .validators import (
    PredicateTuple,
    RuleKind,
    configure,
    engine,
    evaluate,
    validate,
    validation,
)
from .validators.rules import (
    is_array,
    is_boolean,
    is_function,
    is_integer,
    is_nil,
    is_number,
    is_object,
    is_optional,
    is_required,
    is_string,
)

__all__ = [
    "__version__",
    # Main API
    "validate",
    "validation",
    "configure",
    "evaluate",
    "engine",
    # Result types
    "ValidationResult",
    "PredicateTuple",
    "RuleKind",
    # Formatters
    "error_per_message",
    "error_per_property",
    # Config
    "ValidationOptions",
    "AdditionalPropsOptions",
    "InvalidObjectOptions",
    "resolve_options",
    # Tracing
    "TraceEvent",
    "noop_logger",
    "structlog_logger",
    # Errors
    "SchemaCheckError",
    "ConfigurationError",
    "SchemaError",
    # Predicates
    "is_required",
    "is_optional",
    "is_string",
    "is_number",
    "is_integer",
    "is_boolean",
    "is_array",
    "is_object",
    "is_function",
    "is_nil",
]
