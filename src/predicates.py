# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Character predicates used by the password policies.

All checks use the ASCII character classes, so the result does not depend on
the locale or on unicode categories of the candidate.
"""

import string

ASCII_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
ASCII_LETTERS = frozenset(string.ascii_letters)
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def has_upper(value: str) -> bool:
    """Check if the value contains at least one uppercase letter.

    Args:
        value: The string to check.

    Returns: True if an ASCII uppercase letter is present.
    """
    return any(c in string.ascii_uppercase for c in value)


def has_lower(value: str) -> bool:
    """Check if the value contains at least one lowercase letter.

    Args:
        value: The string to check.

    Returns: True if an ASCII lowercase letter is present.
    """
    return any(c in string.ascii_lowercase for c in value)


def has_digit(value: str) -> bool:
    """Check if the value contains at least one decimal digit.

    Args:
        value: The string to check.

    Returns: True if a digit is present.
    """
    return any(c in string.digits for c in value)


def has_minimum_length(value: str, length: int) -> bool:
    """Check if the value is at least `length` characters long."""
    return len(value) >= length


def has_maximum_length(value: str, length: int) -> bool:
    """Check if the value is at most `length` characters long."""
    return len(value) <= length


def is_alphanumeric_only(value: str) -> bool:
    """Check if every character of the value is a letter or a digit.

    An empty value has no offending character and is accepted.

    Args:
        value: The string to check.

    Returns: True if the value holds only ASCII letters and digits.
    """
    return all(c in ASCII_ALPHANUMERIC for c in value)


def has_consecutive_letters(value: str, run_length: int) -> bool:
    """Check if the value contains a run of at least `run_length` letters.

    Args:
        value: The string to check.
        run_length: The minimal number of contiguous letters.

    Returns: True as soon as a long enough run of letters is found.
    """
    consecutive = 0
    for c in value:
        if c not in ASCII_LETTERS:
            consecutive = 0
            continue
        consecutive += 1
        if consecutive >= run_length:
            return True
    return False


def contains_substring_ci(haystack: str, needle: str) -> bool:
    """Check if `needle` appears in `haystack`, ignoring the letter case.

    An empty needle is never contained, and neither is a needle longer than
    the haystack.

    Args:
        haystack: The string to search in.
        needle: The string to look for.

    Returns: True if the needle was found.
    """
    if not needle or len(needle) > len(haystack):
        return False
    return _ascii_lower(needle) in _ascii_lower(haystack)


def _ascii_lower(value: str) -> str:
    return value.translate(_LOWER_TABLE)
