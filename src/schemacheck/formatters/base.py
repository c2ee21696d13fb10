"""Shared plumbing for the error formatters."""

from typing import Any, Dict, List, Mapping, Tuple

from ..core.props import flatten_props
from ..core.shapes import is_mapping, is_sequence
from ..errors import ConfigurationError


def _messages(value: Any) -> List[Any]:
    # the invalid-object entry is a bare string, everything else a list
    if is_sequence(value):
        return list(value)
    return [value]


def flat_errors(tree: Mapping) -> List[Tuple[str, List[Any]]]:
    """Flatten an error tree into (path, messages) pairs."""
    return [(entry.path, _messages(entry.value)) for entry in flatten_props(tree)]


def check_errors(errors: Any) -> Dict[str, Mapping]:
    if errors is None:
        raise ConfigurationError("Errors not specified.")
    if not is_mapping(errors):
        raise ConfigurationError("Errors not a valid object.")

    return {
        "property": errors.get("property") or {},
        "object": errors.get("object") or {},
    }
