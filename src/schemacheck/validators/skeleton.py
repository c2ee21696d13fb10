"""
Schema skeletons: a schema expanded into a template record with None leaves.

Merging the skeleton under real input guarantees the engine sees every
declared key, including the ones the input omits.
"""

from typing import Any, Dict, Mapping, Optional

from ..core.shapes import is_mapping, is_sequence
from ..errors import SchemaError
from .base import RuleKind, classify_rule, invoke


def _element(source: Any, index: int) -> Mapping:
    if is_sequence(source) and index < len(source) and is_mapping(source[index]):
        return source[index]
    return {}


def _expand(rule: Any, value: Any, key: Any, has_source: bool) -> Any:
    kind = classify_rule(rule, key)

    if kind is RuleKind.DYNAMIC:
        if not has_source:
            raise SchemaError(
                "Schema contains function, but no source object specified.", key=key
            )
        return _expand(invoke(rule, value), value, key, has_source)

    if kind is RuleKind.SCHEMA:
        return build_skeleton(rule, value if is_mapping(value) else {})

    if kind is RuleKind.TEMPLATE:
        return [
            build_skeleton(template, _element(value, index))
            for index, template in enumerate(rule)
        ]

    # predicate lists, empty lists and undeclared rules have no structure
    return None


def build_skeleton(schema: Mapping, source: Optional[Mapping] = None) -> Dict[Any, Any]:
    """
    Expand ``schema`` into a same-shaped dict with None leaves.

    Function rules are invoked with the matching source value to obtain a
    concrete rule, so ``source`` is mandatory whenever the schema contains
    one. Array-of-schema templates expand to one skeleton per template
    element, never per input element, so input elements past the template's
    length get no skeleton and no checks. Empty arrays and predicate lists
    become None.

    Args:
        schema: The schema to expand
        source: The record the schema will be applied to

    Returns:
        A new dict holding every declared key

    Raises:
        SchemaError: If the schema is missing or malformed, or a function
            rule is met without a source record
    """
    if schema is None:
        raise SchemaError("No schema specified.")
    if not is_mapping(schema):
        raise SchemaError("Schema is not a valid object.")

    has_source = source is not None
    values = source if is_mapping(source) else {}

    return {
        key: _expand(rule, values.get(key), key, has_source)
        for key, rule in schema.items()
    }
