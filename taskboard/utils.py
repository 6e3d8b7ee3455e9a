from typing import Any


def clean_text(value: Any) -> str:
    """
    Normalize a user-supplied text field.

    Args:
        value: Raw value from a request (may be None or a non-string)

    Returns:
        The stripped string, or "" when the value is missing or not a string
    """
    if not isinstance(value, str):
        return ""
    return value.strip()
