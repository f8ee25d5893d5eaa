"""
SLK581 Statistical Linkage Key

Encodes family name, given name, date of birth and sex into the 14 character
SLK581 key (XXXZZDDMMYYYYN) used to link records across datasets without
exchanging full identifying data.

References:
- AIHW Statistical Linkage Key 581 data element (METeOR 349510)
"""

from .encoder import (
    encode,
    encode_family_name,
    encode_given_name,
    encode_date_of_birth,
    encode_sex
)
from .errors import SLK581Error, InvalidDateOfBirth, UnknownDateOfBirth, UnsupportedSex
from .constants import (
    UNKNOWN_FAMILY_NAME,
    UNKNOWN_GIVEN_NAME,
    UNKNOWN_CHARACTER_IN_NAME,
    MALE,
    FEMALE,
    TRANSGENDER,
    UNKNOWN_SEX,
    INPUT_DATE_FORMAT,
    OUTPUT_DATE_FORMAT
)
from .utils.key_format import (
    validate_slk_format,
    extract_birth_date_from_slk,
    extract_sex_code_from_slk,
    get_slk_validation_info
)

__version__ = "1.0.0"

__all__ = [
    'encode',
    'encode_family_name',
    'encode_given_name',
    'encode_date_of_birth',
    'encode_sex',
    'SLK581Error',
    'InvalidDateOfBirth',
    'UnknownDateOfBirth',
    'UnsupportedSex',
    'UNKNOWN_FAMILY_NAME',
    'UNKNOWN_GIVEN_NAME',
    'UNKNOWN_CHARACTER_IN_NAME',
    'MALE',
    'FEMALE',
    'TRANSGENDER',
    'UNKNOWN_SEX',
    'INPUT_DATE_FORMAT',
    'OUTPUT_DATE_FORMAT',
    'validate_slk_format',
    'extract_birth_date_from_slk',
    'extract_sex_code_from_slk',
    'get_slk_validation_info'
]
