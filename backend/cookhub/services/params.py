"""
CookHub Backend — Query Parameter Helpers
===========================================

Identifiers arrive as raw query-string text. A missing or empty value is a
client error; a value that is present but not an integer simply matches no
rows (the same answer the store gives for an unknown id).
"""

from typing import Optional

from cookhub.exceptions import ValidationError


def require_param(value: Optional[str], name: str) -> str:
    """Return `value`, or raise ValidationError if it is missing or empty."""
    if value is None or value == "":
        raise ValidationError(message=f"{name} is required", field=name)
    return value


def as_id(value: str) -> Optional[int]:
    """Parse a row id; None when the text is not an integer."""
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        return None
