"""
SLK581 key format utilities.

This module provides functions to validate an already computed linkage key
and to read back the fields that do not identify a person on their own
(date of birth and sex code).
"""

import re
from datetime import datetime
from typing import Optional

from ..constants import (
    UNKNOWN_FAMILY_NAME,
    UNKNOWN_GIVEN_NAME,
    OUTPUT_DATE_FORMAT,
    SLK_LENGTH,
)

# 3 family chars + 2 given chars + DDMMYYYY + sex code
_SLK_PATTERN = re.compile(r'^(?:999|[A-Z2]{3})(?:99|[A-Z2]{2})[0-9]{8}[123]$')


def _parse_date_field(key: str) -> Optional[datetime]:
    try:
        return datetime.strptime(key[5:13], OUTPUT_DATE_FORMAT)
    except ValueError:
        return None


def validate_slk_format(key: str) -> bool:
    """
    Validate the format of an SLK581 key.

    Args:
        key: Key to validate

    Returns:
        True if the key has the expected shape and a real calendar date,
        False otherwise
    """
    if not key or len(key) != SLK_LENGTH:
        return False

    if not _SLK_PATTERN.match(key):
        return False

    return _parse_date_field(key) is not None


def extract_birth_date_from_slk(key: str) -> Optional[str]:
    """
    Extract the date of birth from an SLK581 key.

    Args:
        key: SLK581 key

    Returns:
        Birth date in YYYY-MM-DD format, or None if the key is malformed
    """
    if not validate_slk_format(key):
        return None

    dob = _parse_date_field(key)
    return f"{dob.year:04d}-{dob.month:02d}-{dob.day:02d}"


def extract_sex_code_from_slk(key: str) -> Optional[str]:
    """Extract the trailing sex code ('1', '2' or '3') from an SLK581 key."""
    if not validate_slk_format(key):
        return None
    return key[-1]


def get_slk_validation_info(key: str) -> dict:
    """
    Get comprehensive validation information for an SLK581 key.

    Args:
        key: SLK581 key

    Returns:
        Dictionary with validation results and extracted information
    """
    info = {
        'valid_format': False,
        'extracted_birth_date': None,
        'extracted_sex_code': None,
        'family_name_known': False,
        'given_name_known': False,
        'length_valid': False,
        'pattern_valid': False
    }

    if not key:
        return info

    info['length_valid'] = len(key) == SLK_LENGTH
    info['pattern_valid'] = bool(_SLK_PATTERN.match(key))
    info['valid_format'] = validate_slk_format(key)

    if info['valid_format']:
        info['extracted_birth_date'] = extract_birth_date_from_slk(key)
        info['extracted_sex_code'] = extract_sex_code_from_slk(key)
        info['family_name_known'] = key[0:3] != UNKNOWN_FAMILY_NAME
        info['given_name_known'] = key[3:5] != UNKNOWN_GIVEN_NAME

    return info
