"""Data models for schemacheck."""

from .base import ValidationResult

__all__ = [
    "ValidationResult",
]
