"""Utility functions for SLK581 encoding."""

# Import key functions for easier access
from .normalizers import sanitize_name, normalize_sex
from .key_format import (
    validate_slk_format,
    extract_birth_date_from_slk,
    extract_sex_code_from_slk,
    get_slk_validation_info
)

__all__ = [
    'sanitize_name',
    'normalize_sex',
    'validate_slk_format',
    'extract_birth_date_from_slk',
    'extract_sex_code_from_slk',
    'get_slk_validation_info'
]
