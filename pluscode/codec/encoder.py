from __future__ import annotations

"""Coordinate -> Open Location Code.

Two stages: up to PAIR_CODE_LENGTH digits of interleaved base-20 lat/lng
pairs, then one 4x5 grid digit per extra requested digit. The running values
are reduced digit by digit (subtract digit * place_value); keep that order,
the reference vectors depend on it to the last bit.
"""

import math

from pluscode.codec.normalize import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
)
from pluscode.core.constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.errors import invalid_code_length


def _digit(value: float, place_value: float, limit: int) -> int:
    # Last-bit rounding can push the quotient just outside [0, limit).
    return min(limit - 1, max(0, math.floor(value / place_value)))


def encode(
    latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH
) -> str:
    """Encode a location into an Open Location Code.

    Lengths below 8 must be even; every requested digit is emitted.
    Raises InvalidCodeLength for illegal lengths.
    """

    if code_length < 2 or (code_length < SEPARATOR_POSITION and code_length % 2 == 1):
        raise invalid_code_length(code_length)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    # Latitude 90 has no cell above it; nudge it into the topmost cell so the
    # code stays decodable.
    if latitude == LATITUDE_MAX:
        latitude -= compute_latitude_precision(code_length)

    code = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        code += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
    return code


def encode_pairs(latitude: float, longitude: float, code_length: int) -> str:
    """Encode a location into interleaved lat/lng base-20 pairs.

    Each pair has 1/400th the area of the previous one. Digits come in pairs,
    so an odd code_length is rounded up to the next pair.
    """

    adjusted_latitude = latitude + LATITUDE_MAX
    adjusted_longitude = longitude + LONGITUDE_MAX

    out: list[str] = []
    # Counted separately: `out` may contain the separator.
    digit_count = 0
    while digit_count < code_length:
        place_value = PAIR_RESOLUTIONS[digit_count // 2]

        digit = _digit(adjusted_latitude, place_value, ENCODING_BASE)
        adjusted_latitude -= digit * place_value
        out.append(CODE_ALPHABET[digit])
        digit_count += 1

        digit = _digit(adjusted_longitude, place_value, ENCODING_BASE)
        adjusted_longitude -= digit * place_value
        out.append(CODE_ALPHABET[digit])
        digit_count += 1

        if digit_count == SEPARATOR_POSITION and digit_count < code_length:
            out.append(SEPARATOR)

    if len(out) < SEPARATOR_POSITION:
        out.append(PADDING_CHARACTER * (SEPARATOR_POSITION - len(out)))
    if digit_count <= SEPARATOR_POSITION:
        out.append(SEPARATOR)
    return "".join(out)


def encode_grid(latitude: float, longitude: float, code_length: int) -> str:
    """Refine a location with code_length grid digits.

    Each digit picks one cell of a GRID_ROWS x GRID_COLUMNS grid laid over
    the previous area, numbered row * GRID_COLUMNS + col from the south-west.
    """

    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES

    # Offset inside the cell the pair digits already identify.
    adjusted_latitude = (latitude + LATITUDE_MAX) % lat_place_value
    adjusted_longitude = (longitude + LONGITUDE_MAX) % lng_place_value

    out: list[str] = []
    for _ in range(code_length):
        row = _digit(adjusted_latitude, lat_place_value / GRID_ROWS, GRID_ROWS)
        col = _digit(adjusted_longitude, lng_place_value / GRID_COLUMNS, GRID_COLUMNS)

        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS

        adjusted_latitude -= row * lat_place_value
        adjusted_longitude -= col * lng_place_value

        out.append(CODE_ALPHABET[row * GRID_COLUMNS + col])
    return "".join(out)
