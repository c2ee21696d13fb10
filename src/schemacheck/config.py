"""
Options for schemacheck.

Supplied options are merged over the defaults below. Keys may be given in
snake_case or in the camelCase spelling (``additionalProps``,
``invalidObject``) used by JSON configuration.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .tracing import noop_logger

DEFAULT_ADDITIONAL_PROPERTY_MESSAGE = "Unexpected property."
DEFAULT_INVALID_OBJECT_PROPERTY = "validObject"
DEFAULT_INVALID_OBJECT_MESSAGE = "Invalid object."


class AdditionalPropsOptions(BaseModel):
    """How input keys missing from the schema are reported."""

    model_config = ConfigDict(extra="forbid")

    ignore: bool = False
    message: str = DEFAULT_ADDITIONAL_PROPERTY_MESSAGE


class InvalidObjectOptions(BaseModel):
    """The object error reported when the input is missing or not a mapping."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    property_name: str = Field(DEFAULT_INVALID_OBJECT_PROPERTY, alias="property")
    message: str = DEFAULT_INVALID_OBJECT_MESSAGE


class ValidationOptions(BaseModel):
    """All options accepted by ``validation``/``configure``."""

    model_config = ConfigDict(
        extra="forbid", populate_by_name=True, arbitrary_types_allowed=True
    )

    additional_props: AdditionalPropsOptions = Field(
        default_factory=AdditionalPropsOptions, alias="additionalProps"
    )
    invalid_object: InvalidObjectOptions = Field(
        default_factory=InvalidObjectOptions, alias="invalidObject"
    )
    logger: Callable[..., Any] = noop_logger

    @field_validator("logger", mode="before")
    @classmethod
    def _check_logger(cls, value: Any) -> Any:
        if value is None:
            return noop_logger
        if not callable(value):
            raise ValueError("Specified logger is not a function.")
        return value


def resolve_options(
    options: Optional[Union[Mapping, ValidationOptions]] = None,
) -> ValidationOptions:
    """
    Merge user options over the defaults.

    Raises:
        ConfigurationError: If options are not a mapping, contain unknown
            keys, or specify a logger that is not callable
    """
    if options is None:
        return ValidationOptions()
    if isinstance(options, ValidationOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError("Options is not a valid object.")

    try:
        return ValidationOptions.model_validate(dict(options))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid options: {e}", details={"errors": e.errors()}
        ) from e
