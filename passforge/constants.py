"""
passforge.constants
Character pools, limits and decoration codes shared by both generators.
"""

import string

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL_CHARS = "!#$%&()*+-./:;<=>?@[]^_{|}~'"

MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 128

MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 20
DEFAULT_WORD_COUNT = 4
DEFAULT_SEPARATOR = "-"

# exclusion strings may be written as "a,b,c"
EXCLUDE_DELIMITER = ","

# largest number (exclusive) attached to a passphrase word
MAX_WORD_NUMBER = 1000

# where a number or symbol is attached to a word
ATTACH_FRONT = 0
ATTACH_REAR = 1
ATTACH_POSITIONS = (ATTACH_FRONT, ATTACH_REAR)

# per-word passphrase decorations
SKIP_ACTION = 0
INCLUDE_UPPERCASE = 1
INCLUDE_LOWERCASE = 2
INCLUDE_NUMBERS = 3
INCLUDE_SPECIAL_CHARACTERS = 4
