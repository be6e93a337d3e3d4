"""
Input Validation Utilities

FLOW OVERVIEW
- sanitize_input(value)
  • Coerce to str, strip surrounding whitespace, remove null bytes.
- validate_title(raw_title)
  • The only rule for a to-do title: non-empty after sanitizing.
- require_title(raw_title)
  • Same check, raising ValidationError instead of returning a result.
"""

from typing import Optional
from dataclasses import dataclass

from ..errors import ValidationError


@dataclass
class ValidationResult:
    """Result of validation operation"""
    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Optional[str] = None


def sanitize_input(value) -> str:
    """
    Normalize raw form input.

    Args:
        value: Raw input (None is treated as empty)

    Returns:
        Stripped string without null bytes
    """
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    # PostgreSQL text columns reject NUL characters
    return value.replace('\x00', '').strip()


def validate_title(raw_title) -> ValidationResult:
    """Validate a to-do title; on success sanitized_value holds the stored form."""
    title = sanitize_input(raw_title)
    if not title:
        return ValidationResult(False, "Title cannot be empty")
    return ValidationResult(True, sanitized_value=title)


def require_title(raw_title) -> str:
    """Return the sanitized title or raise ValidationError."""
    validation = validate_title(raw_title)
    if not validation.is_valid:
        raise ValidationError(validation.error_message)
    return validation.sanitized_value
