"""Reformat an error tree into one record per property."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .base import check_errors, flat_errors


@dataclass(frozen=True)
class PropertyError:
    name: str
    messages: List[Any] = field(default_factory=list)


def _to_errors(tree: Mapping) -> List[PropertyError]:
    return [
        PropertyError(name=path, messages=messages)
        for path, messages in flat_errors(tree)
    ]


def error_per_property(errors: Mapping) -> Dict[str, List[PropertyError]]:
    trees = check_errors(errors)
    return {
        "property": _to_errors(trees["property"]),
        "object": _to_errors(trees["object"]),
    }
