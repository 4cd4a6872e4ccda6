from __future__ import annotations

import math

from pluscode.core.constants import (
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)


def clip_latitude(latitude: float) -> float:
    """Clip a latitude into [-90, 90]."""

    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Normalize a longitude into [-180, 180)."""

    if -LONGITUDE_MAX <= longitude < LONGITUDE_MAX:
        return longitude
    # Floored modulo: result is in [0, 360) for any finite input.
    longitude = longitude % (2 * LONGITUDE_MAX)
    if longitude >= LONGITUDE_MAX:
        longitude -= 2 * LONGITUDE_MAX
    return longitude


def compute_latitude_precision(code_length: int) -> float:
    """Height in degrees of the cell a code of this length identifies.

    Up to 10 digits latitude and longitude share the pair precision. Past
    that each grid digit divides latitude by GRID_ROWS only, since the grid
    has more rows than columns.
    """

    if code_length <= PAIR_CODE_LENGTH:
        return ENCODING_BASE ** math.floor(code_length / -2 + 2)
    return ENCODING_BASE**-3 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)
