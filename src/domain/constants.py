"""Domain constants for household proration."""

import string

SHARE_CODE_LENGTH = 6
SHARE_CODE_ALPHABET = string.ascii_uppercase + string.digits

JOINED_HOME_NAME_PREFIX = "Home"


__all__ = [
    "SHARE_CODE_LENGTH",
    "SHARE_CODE_ALPHABET",
    "JOINED_HOME_NAME_PREFIX",
]
