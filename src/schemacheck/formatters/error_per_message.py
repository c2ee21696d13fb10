"""Reformat an error tree into one record per message."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .base import check_errors, flat_errors


@dataclass(frozen=True)
class MessageError:
    name: str
    message: Any


def _to_errors(tree: Mapping) -> List[MessageError]:
    return [
        MessageError(name=path, message=message)
        for path, messages in flat_errors(tree)
        for message in messages
    ]


def error_per_message(errors: Mapping) -> Dict[str, List[MessageError]]:
    """
    {"property": {"a": {"b": ["x", "y"]}}} ->
    {"property": [MessageError("a.b", "x"), MessageError("a.b", "y")], "object": []}
    """
    trees = check_errors(errors)
    return {
        "property": _to_errors(trees["property"]),
        "object": _to_errors(trees["object"]),
    }
