"""
SLK581 format constants.

The key layout is XXXZZDDMMYYYYN: three family name characters, two given
name characters, the date of birth as DDMMYYYY and a single sex code.
"""

# Placeholders for absent names and missing name characters
UNKNOWN_FAMILY_NAME = "999"
UNKNOWN_GIVEN_NAME = "99"
UNKNOWN_CHARACTER_IN_NAME = "2"

# Sex codes
MALE = "1"
FEMALE = "2"
TRANSGENDER = "3"
# Same digit as TRANSGENDER; the published format does not tell them apart
UNKNOWN_SEX = "3"

# Date of birth formats
INPUT_DATE_FORMAT = "%Y-%m-%d"
OUTPUT_DATE_FORMAT = "%d%m%Y"

# Name windows: (letters considered, cursor offsets)
FAMILY_NAME_WINDOW = 5
FAMILY_NAME_OFFSETS = (1, 0, 1)
GIVEN_NAME_WINDOW = 3
GIVEN_NAME_OFFSETS = (1, 0)

SLK_LENGTH = 14
