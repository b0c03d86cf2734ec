"""
cryptoh Input Validation

Guards every string parameter before any cryptographic work
begins. Values are never coerced: a number passed where text is
expected is rejected, not converted with str().
"""

from typing import Any, Optional

from .errors import InvalidInputError


def validate_input(value: Any, field_name: Optional[str] = None) -> None:
    """
    Reject non-string, empty, whitespace-only or unencodable input.
    
    Args:
        value: Parameter value to check
        field_name: Name used in the error message
        
    Raises:
        InvalidInputError: If value is not a non-blank UTF-8 string
    """
    name = f"{field_name.strip()} " if field_name and field_name.strip() else ""
    
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Input {name}must be a string, got {type(value).__name__}."
        )
    
    if value.strip() == "":
        raise InvalidInputError(f"Input {name}must not be empty or whitespace.")
    
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInputError(f"Input {name}is not valid UTF-8 text.") from None
