"""
Input validation utilities for Passforge.

These checks belong to the caller: the generator itself tolerates any
configuration and simply produces no password when it cannot.
"""

from typing import Any, Optional

from .password_generator import DEFAULT_OPTIONS, PasswordConfig

MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = DEFAULT_OPTIONS["length"]


def validate_length(length: Any) -> bool:
    """
    Validate a requested password length.

    Args:
        length: The length to validate

    Returns:
        True if length is an integer within [MIN_LENGTH, MAX_LENGTH]
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return False

    return MIN_LENGTH <= length <= MAX_LENGTH


def correct_length(length: Any) -> int:
    """
    Auto-correct a requested length into the allowed range.

    Args:
        length: Integer or numeric text entered by the user

    Returns:
        The length clamped to [MIN_LENGTH, MAX_LENGTH], or DEFAULT_LENGTH
        if the input is not a number
    """
    if isinstance(length, bool):
        return DEFAULT_LENGTH

    try:
        value = int(str(length).strip())
    except ValueError:
        return DEFAULT_LENGTH

    return max(MIN_LENGTH, min(value, MAX_LENGTH))


def has_character_class(config: PasswordConfig) -> bool:
    return any((config.use_lower, config.use_upper, config.use_digits, config.use_special))


def validate_config(config: PasswordConfig) -> bool:
    """Return True if the generate action should be enabled for config."""
    return get_validation_error_message(config) is None


def get_validation_error_message(config: PasswordConfig) -> Optional[str]:
    """
    Get a descriptive error message for an invalid configuration.

    Args:
        config: The configuration to check

    Returns:
        Error message, or None if the configuration is valid
    """
    if not validate_length(config.length):
        return f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}"

    if not has_character_class(config):
        return "Select at least one character type"

    return None
