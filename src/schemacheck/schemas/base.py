"""Result model returned by validation."""

from typing import Any, Dict

from pydantic import BaseModel, Field


def _empty_errors() -> Dict[str, Dict[Any, Any]]:
    return {"property": {}, "object": {}}


class ValidationResult(BaseModel):
    """
    Outcome of validating one record.

    ``errors["property"]`` mirrors the schema and holds only failing
    properties (plus any undeclared input keys); ``errors["object"]`` holds the
    failing object rules, or the invalid-object entry when the input was not a
    mapping.
    """

    is_valid: bool
    errors: Dict[str, Dict[Any, Any]] = Field(default_factory=_empty_errors)

    @property
    def property_errors(self) -> Dict[Any, Any]:
        return self.errors.get("property", {})

    @property
    def object_errors(self) -> Dict[Any, Any]:
        return self.errors.get("object", {})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the JSON result shape."""
        return {"isValid": self.is_valid, "errors": self.errors}
