"""
Name and sex normalization utilities for SLK581 encoding.

This module provides the normalization steps applied to raw input values
before they are turned into key fragments.
"""

import re

# Anything outside the plain Latin alphabet, after upper-casing
_NON_LATIN_LETTER = re.compile(r'[^A-Z]')


def sanitize_name(name: str) -> str:
    """
    Sanitize a family or given name for key extraction.

    The name is upper-cased and every character that is not A-Z is dropped.
    Accented letters are removed rather than transliterated:
    - "O'Ber" → "OBER"
    - "O Bare" → "OBARE"
    - "Müller" → "MLLER"

    Args:
        name: Raw name as entered

    Returns:
        Upper-case string containing only the letters A-Z
    """
    if not name:
        return ""
    return _NON_LATIN_LETTER.sub('', name.upper())


def normalize_sex(sex: str) -> str:
    """
    Normalize a sex value for vocabulary lookup.

    Only the case is folded; surrounding whitespace is significant.

    Args:
        sex: Raw sex value

    Returns:
        Lower-case sex value
    """
    if not sex:
        return ""
    return sex.lower()
