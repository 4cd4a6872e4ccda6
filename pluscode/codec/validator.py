from __future__ import annotations

"""String classification of Open Location Codes.

All predicates are total: malformed input (including None) yields False.
"""

import re

from pluscode.core.constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)


_PADDING_RUN = re.compile(re.escape(PADDING_CHARACTER) + "+")
_DIGITS = frozenset(CODE_ALPHABET)


def is_valid(code: str | None) -> bool:
    """Whether `code` is a syntactically valid full or short code.

    Exactly one separator, at an even index no later than SEPARATOR_POSITION.
    Padding may only appear as one even-length run ending at the separator,
    which must then be the last character. A single digit after the separator
    is not allowed.
    """

    if not code:
        return False

    separator = code.find(SEPARATOR)
    if separator == -1 or code.count(SEPARATOR) > 1:
        return False
    if separator > SEPARATOR_POSITION or separator % 2 == 1:
        return False

    padding = code.find(PADDING_CHARACTER)
    if padding != -1:
        if padding == 0:
            return False
        runs = _PADDING_RUN.findall(code)
        if (
            len(runs) > 1
            or len(runs[0]) % 2 == 1
            or len(runs[0]) > SEPARATOR_POSITION - 2
        ):
            return False
        if not code.endswith(SEPARATOR):
            return False

    if len(code) - separator - 1 == 1:
        return False

    digits = _PADDING_RUN.sub("", code.replace(SEPARATOR, ""), count=1)
    return all(ch.upper() in _DIGITS for ch in digits)


def is_short(code: str | None) -> bool:
    """Whether `code` is valid but lacks leading digits.

    A short code needs a reference location before it can be decoded.
    """

    if not is_valid(code):
        return False
    return code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: str | None) -> bool:
    """Whether `code` is valid, not short, and inside the lat/lng range.

    The first two digits are checked against 180 and 360 degrees so codes
    pointing past the pole or the antimeridian are rejected.
    """

    if not is_valid(code) or is_short(code):
        return False

    first_lat_value = CODE_ALPHABET.index(code[0].upper()) * ENCODING_BASE
    if first_lat_value >= LATITUDE_MAX * 2:
        return False

    if len(code) > 1:
        first_lng_value = CODE_ALPHABET.index(code[1].upper()) * ENCODING_BASE
        if first_lng_value >= LONGITUDE_MAX * 2:
            return False

    return True
