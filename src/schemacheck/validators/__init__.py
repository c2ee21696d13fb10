"""
Validation engine for nested records.

A schema maps property names to rules: lists of (predicate, message) tuples,
nested schemas, array templates, or functions producing a rule from the
property's value.
"""

from .base import PredicateTuple, RuleKind, check_schema, classify_rule
from .engine import accept, engine, evaluate, reject, run_predicate
from .skeleton import build_skeleton
from .validation import configure, validate, validation

__all__ = [
    "PredicateTuple",
    "RuleKind",
    "accept",
    "build_skeleton",
    "check_schema",
    "classify_rule",
    "configure",
    "engine",
    "evaluate",
    "reject",
    "run_predicate",
    "validate",
    "validation",
]
