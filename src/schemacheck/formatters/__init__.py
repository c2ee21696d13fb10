"""
Formatters turning ValidationResult.errors into flat lists for display.
"""

from .error_per_message import MessageError, error_per_message
from .error_per_property import PropertyError, error_per_property

__all__ = [
    "MessageError",
    "PropertyError",
    "error_per_message",
    "error_per_property",
]
