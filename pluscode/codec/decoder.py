from __future__ import annotations

import re

from pluscode.codec.area import CodeArea
from pluscode.codec.validator import is_full
from pluscode.core.constants import (
    CODE_ALPHABET,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
)
from pluscode.core.errors import invalid_full_code


_PADDING_RUN = re.compile(re.escape(PADDING_CHARACTER) + "+")


def strip_code(code: str) -> str:
    """Return the significant digits of a valid code, upper-cased."""

    code = code.replace(SEPARATOR, "", 1)
    code = _PADDING_RUN.sub("", code, count=1)
    return code.upper()


def decode(code: str) -> CodeArea:
    """Decode a full Open Location Code into the area it identifies.

    Raises InvalidFullCode for anything `is_full` rejects, including short
    codes; recover those with `recover_nearest` first.
    """

    if not is_full(code):
        raise invalid_full_code(code)

    digits = strip_code(code)

    code_area = decode_pairs(digits[:PAIR_CODE_LENGTH])
    if len(digits) <= PAIR_CODE_LENGTH:
        return code_area

    grid_area = decode_grid(digits[PAIR_CODE_LENGTH:])

    # Grid bounds are offsets from the pair area's south-west corner.
    return CodeArea(
        code_area.latitude_lo + grid_area.latitude_lo,
        code_area.longitude_lo + grid_area.longitude_lo,
        code_area.latitude_lo + grid_area.latitude_hi,
        code_area.longitude_lo + grid_area.longitude_hi,
        code_area.code_length + grid_area.code_length,
    )


def decode_pairs(code: str) -> CodeArea:
    """Decode the lat/lng pair digits (separator already removed)."""

    latitude_lo, latitude_hi = decode_pairs_sequence(code, 0)
    longitude_lo, longitude_hi = decode_pairs_sequence(code, 1)

    return CodeArea(
        latitude_lo - LATITUDE_MAX,
        longitude_lo - LONGITUDE_MAX,
        latitude_hi - LATITUDE_MAX,
        longitude_hi - LONGITUDE_MAX,
        len(code),
    )


def decode_pairs_sequence(code: str, offset: int) -> tuple[float, float]:
    """Decode every second digit starting at `offset`.

    Returns (low, high) in the shifted, non-negative range; high is low plus
    the resolution of the last position read.
    """

    value = 0.0
    i = 0
    while i * 2 + offset < len(code):
        value += CODE_ALPHABET.index(code[i * 2 + offset]) * PAIR_RESOLUTIONS[i]
        i += 1
    return value, value + PAIR_RESOLUTIONS[i - 1]


def decode_grid(code: str) -> CodeArea:
    """Decode grid refinement digits into offsets within the pair cell."""

    latitude_lo = 0.0
    longitude_lo = 0.0
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES

    for ch in code:
        row, col = divmod(CODE_ALPHABET.index(ch), GRID_COLUMNS)

        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS

        latitude_lo += row * lat_place_value
        longitude_lo += col * lng_place_value

    return CodeArea(
        latitude_lo,
        longitude_lo,
        latitude_lo + lat_place_value,
        longitude_lo + lng_place_value,
        len(code),
    )
