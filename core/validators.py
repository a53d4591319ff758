"""
Field-level predicates for wire message values.
Used as pre-checks before numeric conversion; never convert themselves.
"""
import string

DIGITS = frozenset(string.digits)


def is_numeric_string(value: str) -> bool:
    """
    Check that every character is an ASCII decimal digit.

    The empty string passes: callers that require a value must check
    for emptiness themselves.

    Args:
        value: String to check

    Returns:
        True if the string contains only digits 0-9
    """
    return all(char in DIGITS for char in value)


def is_exact_length_digits(value: str, length: int) -> bool:
    """Check that value is numeric and exactly `length` characters long."""
    return is_numeric_string(value) and len(value) == length
