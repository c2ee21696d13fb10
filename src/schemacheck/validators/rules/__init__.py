"""Built-in predicates for predicate tuples."""

from .presence_rules import is_optional, is_required
from .type_rules import (
    is_array,
    is_boolean,
    is_function,
    is_integer,
    is_nil,
    is_number,
    is_object,
    is_string,
)

__all__ = [
    # Presence
    "is_required",
    "is_optional",
    # Types
    "is_string",
    "is_number",
    "is_integer",
    "is_boolean",
    "is_array",
    "is_object",
    "is_function",
    "is_nil",
]
