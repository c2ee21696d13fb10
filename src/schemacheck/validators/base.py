"""Rule shapes and the helpers used to interpret them."""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Union

from ..core.shapes import is_mapping, is_sequence
from ..errors import SchemaError

Message = Union[str, Callable[..., str]]


class RuleKind(str, Enum):
    """The shape of a declared rule."""

    ABSENT = "absent"
    PREDICATES = "predicates"
    SCHEMA = "schema"
    TEMPLATE = "template"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class PredicateTuple:
    """A predicate paired with the message reported when it fails."""

    predicate: Callable[..., Any]
    message: Message

    @classmethod
    def from_rule(cls, rule: Any, key: Any = None) -> "PredicateTuple":
        if isinstance(rule, PredicateTuple):
            return rule
        if not is_sequence(rule) or len(rule) != 2:
            raise SchemaError(
                f"Rule for property '{key}' is not a (predicate, message) pair.",
                key=key,
            )

        predicate, message = rule
        if predicate is None:
            raise SchemaError(f"No predicate specified for property '{key}'.", key=key)
        if not callable(predicate):
            raise SchemaError(
                f"Predicate for property '{key}' is not a function.", key=key
            )
        if not isinstance(message, str) and not callable(message):
            raise SchemaError(
                f"Message for property '{key}' must be a string or a function.",
                key=key,
            )

        return cls(predicate=predicate, message=message)


def _is_predicate_tuple(item: Any) -> bool:
    return isinstance(item, PredicateTuple) or is_sequence(item)


def classify_rule(rule: Any, key: Any = None) -> RuleKind:
    """
    Decide which kind of rule a declared schema value is.

    A TEMPLATE is positional: template element i validates input element i
    only. Input elements beyond the template's length have no rule and pass,
    so a rule for every element of a variable-length array should be a
    function returning one template per element.

    Raises:
        SchemaError: If the value matches none of the rule shapes
    """
    if rule is None:
        return RuleKind.ABSENT
    if is_mapping(rule):
        return RuleKind.SCHEMA
    if callable(rule):
        return RuleKind.DYNAMIC
    if is_sequence(rule):
        if all(is_mapping(item) for item in rule) and len(rule) > 0:
            return RuleKind.TEMPLATE
        if all(_is_predicate_tuple(item) for item in rule):
            return RuleKind.PREDICATES

    raise SchemaError(
        f"Rule for property '{key}' is not a predicate list, schema, template or function: {rule!r}",
        key=key,
    )


def check_schema(schema: Mapping) -> None:
    """
    Classify every statically declared rule of ``schema``, recursively.

    Function rules are only known once they see a value, so they are left
    for evaluation time.

    Raises:
        SchemaError: On the first rule that is not a valid shape or
            holds a malformed predicate tuple
    """
    for key, rule in schema.items():
        kind = classify_rule(rule, key)
        if kind is RuleKind.PREDICATES:
            for item in rule:
                PredicateTuple.from_rule(item, key)
        elif kind is RuleKind.SCHEMA:
            check_schema(rule)
        elif kind is RuleKind.TEMPLATE:
            for template in rule:
                check_schema(template)


def _positional_arity(fn: Callable) -> int:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return -1
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def invoke(fn: Callable, *args: Any) -> Any:
    """Call ``fn`` with as many leading ``args`` as it accepts."""
    arity = _positional_arity(fn)
    if arity < 0:
        return fn(*args)
    return fn(*args[:arity])


def describe(fn: Callable) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
