"""
Validation of whole records: property errors, additional properties and
cross-field object rules combined into one ValidationResult.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Union

from ..config import ValidationOptions, resolve_options
from ..core.merge import merge_trees, merge_with_arrays
from ..core.props import diff_props, filter_props, set_props
from ..core.shapes import is_empty, is_mapping
from ..errors import ConfigurationError, SchemaError
from ..schemas.base import ValidationResult
from ..tracing import TraceEvent, TraceLogger
from .base import check_schema
from .engine import engine
from .skeleton import build_skeleton

Validator = Callable[[Any], ValidationResult]

_failures = filter_props(lambda leaf: leaf is not True)


def _additional_property_errors(
    skeleton: Mapping, record: Mapping, message: str
) -> Dict[Any, Any]:
    diff = diff_props(skeleton, record)
    if is_empty(diff):
        return {}
    return set_props(lambda key: [message])(diff)


def _object_rule_errors(
    log: TraceLogger, object_rules: Mapping, merged: Mapping
) -> Dict[Any, Any]:
    bound = MappingProxyType({name: merged for name in object_rules})

    def whole_record(key: Any = None) -> Mapping:
        return bound

    return _failures(engine(log, object_rules, whole_record))


def _invalid_object(options: ValidationOptions) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        errors={
            "property": {},
            "object": {
                options.invalid_object.property_name: options.invalid_object.message
            },
        },
    )


def validation(
    options: Optional[Union[Mapping, ValidationOptions]] = None,
) -> Callable[..., Validator]:
    """
    Bind options and return a schema binder.

    Usage:
        check = validation({"additionalProps": {"ignore": True}})(schema)
        result = check(record)

    Raises:
        ConfigurationError: If the options are invalid (including a logger
            that is not callable)
    """
    resolved = resolve_options(options)

    def bind(schema: Mapping, object_rules: Optional[Mapping] = None) -> Validator:
        if schema is None:
            raise SchemaError("No schema specified.")
        if not is_mapping(schema):
            raise SchemaError("Schema is not a valid object.")
        if object_rules is not None and not is_mapping(object_rules):
            raise SchemaError("Object rules is not a valid object.")

        check_schema(schema)
        if object_rules:
            check_schema(object_rules)

        def run(record: Any = None) -> ValidationResult:
            if not is_mapping(record):
                resolved.logger(
                    TraceEvent(
                        type="validation",
                        stage="processed",
                        message="Input is not a valid object.",
                        data={"input_type": type(record).__name__},
                    )
                )
                return _invalid_object(resolved)

            skeleton = build_skeleton(schema, record)
            merged = merge_with_arrays(skeleton, record)
            property_errors = _failures(engine(resolved.logger, schema, merged))

            if not resolved.additional_props.ignore:
                additional = _additional_property_errors(
                    skeleton, record, resolved.additional_props.message
                )
                property_errors = merge_trees(property_errors, additional)

            object_errors: Dict[Any, Any] = {}
            if object_rules:
                object_errors = _object_rule_errors(
                    resolved.logger, object_rules, merged
                )

            is_valid = is_empty(property_errors) and is_empty(object_errors)
            resolved.logger(
                TraceEvent(
                    type="validation",
                    stage="processed",
                    message="Validation finished.",
                    data={
                        "is_valid": is_valid,
                        "property_errors": len(property_errors),
                        "object_errors": len(object_errors),
                    },
                )
            )

            return ValidationResult(
                is_valid=is_valid,
                errors={"property": property_errors, "object": object_errors},
            )

        return run

    return bind


def validate(
    schema: Mapping,
    object_rules: Optional[Mapping] = None,
    *,
    options: Optional[Union[Mapping, ValidationOptions]] = None,
) -> Validator:
    """
    Build a validator for ``schema``.

    Args:
        schema: Mapping of property name to rule
        object_rules: Optional cross-field rules; each rule name sees the
            whole record as its value
        options: Optional options mapping (see ``ValidationOptions``)

    Returns:
        A callable taking a record and returning a ValidationResult
    """
    return validation(options)(schema, object_rules)


def configure(options: Union[Mapping, ValidationOptions]) -> Callable[..., Validator]:
    """Options front-end: like ``validation`` but options are mandatory."""
    if options is None:
        raise ConfigurationError("Options not specified.")
    if not isinstance(options, (Mapping, ValidationOptions)):
        raise ConfigurationError("Options is not a valid object.")

    return validation(options)
