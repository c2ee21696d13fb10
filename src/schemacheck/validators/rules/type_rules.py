"""Type-check predicates for use in predicate tuples."""

from numbers import Number
from typing import Any

from ...core.shapes import is_mapping, is_nil, is_sequence


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a number in a record
    return isinstance(value, Number) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return is_sequence(value)


def is_object(value: Any) -> bool:
    return is_mapping(value)


def is_function(value: Any) -> bool:
    return callable(value)


__all__ = [
    "is_array",
    "is_boolean",
    "is_function",
    "is_integer",
    "is_nil",
    "is_number",
    "is_object",
    "is_string",
]
