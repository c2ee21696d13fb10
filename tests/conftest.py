"""Pytest configuration and fixtures."""

from typing import Dict, List

import pytest

from schemacheck import TraceEvent, is_array, is_required, is_string

# ---------------------------------------------------------------------------
# Predicates and messages used by the fixtures
# ---------------------------------------------------------------------------


def min_length(length):
    return lambda value: value is not None and len(value) > length


def has_capital_letter(value) -> bool:
    return value is not None and any(char.isupper() for char in value)


def equals_sibling(sibling):
    return lambda value, scope: value == scope.get(sibling)


def minimum_msg(field: str, length: int) -> str:
    return f"Minimum {field} length of {length} is required."


class CapturingLogger:
    """Trace callback recording every event it receives."""

    def __init__(self):
        self.events: List[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]


@pytest.fixture
def capturing_logger() -> CapturingLogger:
    return CapturingLogger()


@pytest.fixture
def password_schema() -> Dict:
    """Two password fields, the second compared against the first."""
    return {
        "password": [
            [min_length(5), minimum_msg("Password", 6)],
            [has_capital_letter, "Password should contain an uppercase letter."],
        ],
        "repeatPassword": [
            [min_length(5), minimum_msg("RepeatPassword", 6)],
            [has_capital_letter, "RepeatPassword should contain an uppercase letter."],
            [equals_sibling("password"), "RepeatPassword should equal Password"],
        ],
    }


@pytest.fixture
def item_schema() -> Dict:
    return {"name": [[is_required(is_string), "name is a required string"]]}


@pytest.fixture
def specs_schema(item_schema) -> Dict:
    """A collection validated element by element against item_schema."""
    return {"specs": lambda specs: [item_schema for _ in specs or []]}


@pytest.fixture
def user_schema() -> Dict:
    return {
        "forename": [[is_required(is_string), "forename is required"]],
        "surname": [[is_required(is_string), "surname is required"]],
    }


@pytest.fixture
def user_rules() -> Dict:
    return {
        "forenameCannotEqualSurname": [
            [
                lambda user: user["forename"] != user["surname"],
                "forename cannot equal surname",
            ]
        ]
    }


@pytest.fixture
def required_specs_schema() -> Dict:
    return {"specs": [[is_required(is_array), "specs is a required array"]]}
