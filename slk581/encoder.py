"""
SLK581 encoder.

Builds the 14 character Statistical Linkage Key XXXZZDDMMYYYYN from family
name, given name, date of birth and sex:

1. XXX - 2nd, 3rd and 5th letters of the family name; 999 when absent
2. ZZ - 2nd and 3rd letters of the given name; 99 when absent
3. DDMMYYYY - date of birth, given as YYYY-MM-DD
4. N - sex: 1 male, 2 female, 3 transgender or unknown

Missing letters in a name are replaced with 2.
"""

import logging
from datetime import datetime
from itertools import islice
from typing import Iterable, Optional

from .constants import (
    UNKNOWN_FAMILY_NAME,
    UNKNOWN_GIVEN_NAME,
    UNKNOWN_CHARACTER_IN_NAME,
    MALE,
    FEMALE,
    TRANSGENDER,
    UNKNOWN_SEX,
    INPUT_DATE_FORMAT,
    FAMILY_NAME_WINDOW,
    FAMILY_NAME_OFFSETS,
    GIVEN_NAME_WINDOW,
    GIVEN_NAME_OFFSETS,
)
from .errors import InvalidDateOfBirth, UnknownDateOfBirth, UnsupportedSex
from .utils.normalizers import sanitize_name, normalize_sex

logger = logging.getLogger(__name__)

SEX_CODES = {
    'm': MALE,
    'male': MALE,
    'f': FEMALE,
    'female': FEMALE,
    't': TRANSGENDER,
    'trans': TRANSGENDER,
}


def _encode_name(name: str, window: int, offsets: Iterable[int]) -> str:
    """
    Pick letters from a sanitized name with a single forward cursor.

    Each offset skips that many letters past the previous pick, so (1, 0, 1)
    over "SMITH" yields "M", "I", "H". Picks past the end of the window
    become the placeholder character.
    """
    letters = islice(sanitize_name(name), window)
    picked = []
    for offset in offsets:
        picked.append(next(islice(letters, offset, None), UNKNOWN_CHARACTER_IN_NAME))

    if UNKNOWN_CHARACTER_IN_NAME in picked:
        logger.debug("Name shorter than required, placeholder characters used")

    return ''.join(picked)


def encode_family_name(family_name: Optional[str]) -> str:
    """Encode the family name as 3 characters, '999' if it is absent."""
    if family_name is None:
        return UNKNOWN_FAMILY_NAME
    return _encode_name(family_name, FAMILY_NAME_WINDOW, FAMILY_NAME_OFFSETS)


def encode_given_name(given_name: Optional[str]) -> str:
    """Encode the given name as 2 characters, '99' if it is absent."""
    if given_name is None:
        return UNKNOWN_GIVEN_NAME
    return _encode_name(given_name, GIVEN_NAME_WINDOW, GIVEN_NAME_OFFSETS)


def encode_date_of_birth(date_of_birth: Optional[str]) -> str:
    """
    Encode the date of birth as DDMMYYYY.

    Args:
        date_of_birth: Date of birth in YYYY-MM-DD format

    Returns:
        Date of birth in DDMMYYYY format

    Raises:
        UnknownDateOfBirth: date of birth not provided
        InvalidDateOfBirth: date of birth not in YYYY-MM-DD format
    """
    if date_of_birth is None:
        logger.debug("Date of birth not provided")
        raise UnknownDateOfBirth()

    try:
        dob = datetime.strptime(date_of_birth, INPUT_DATE_FORMAT)
    except ValueError:
        logger.debug(f"Date of birth rejected, expected format {INPUT_DATE_FORMAT}")
        raise InvalidDateOfBirth() from None

    # Same layout as OUTPUT_DATE_FORMAT; strftime does not zero-pad years
    # before 1000 on every platform
    return f"{dob.day:02d}{dob.month:02d}{dob.year:04d}"


def encode_sex(sex: Optional[str]) -> str:
    """
    Encode sex as a single digit.

    Recognized values are m, male, f, female, t and trans, in any case.
    An absent value encodes as unknown ('3').

    Raises:
        UnsupportedSex: value outside the recognized vocabulary
    """
    if sex is None:
        return UNKNOWN_SEX

    code = SEX_CODES.get(normalize_sex(sex))
    if code is None:
        logger.debug(f"Unsupported sex value: '{sex}'")
        raise UnsupportedSex(sex)

    return code


def encode(family_name: Optional[str],
           given_name: Optional[str],
           date_of_birth: Optional[str],
           sex: Optional[str]) -> str:
    """
    Encode family name, given name, date of birth and sex as an SLK581 key.

    Example keys for date of birth "2000-12-19":
    - "Doe" + "John" + "m" → "OE2OH191220001"
    - "Smith" + "Jane" + "f" → "MIHAN191220002"
    - "O Bare" + "Foo" + "t" → "BAEOO191220003"
    - None + None + None → "99999191220003" (names and sex unknown)

    Date of birth is checked before sex, so when both are invalid the date
    of birth error is raised.

    Args:
        family_name: Family name, or None if unknown
        given_name: Given name, or None if unknown
        date_of_birth: Date of birth in YYYY-MM-DD format
        sex: Sex value, or None if unknown

    Returns:
        14 character SLK581 key

    Raises:
        UnknownDateOfBirth: date of birth not provided
        InvalidDateOfBirth: date of birth not in YYYY-MM-DD format
        UnsupportedSex: sex value outside the recognized vocabulary
    """
    encoded_family_name = encode_family_name(family_name)
    encoded_given_name = encode_given_name(given_name)
    encoded_date_of_birth = encode_date_of_birth(date_of_birth)
    encoded_sex = encode_sex(sex)

    return f"{encoded_family_name}{encoded_given_name}{encoded_date_of_birth}{encoded_sex}"
