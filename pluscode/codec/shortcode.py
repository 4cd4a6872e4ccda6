from __future__ import annotations

"""Trim and restore the leading digits of a code near a reference point."""

from pluscode.codec.decoder import decode
from pluscode.codec.encoder import encode
from pluscode.codec.normalize import clip_latitude, normalize_longitude
from pluscode.codec.validator import is_full, is_short
from pluscode.core.constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    MIN_TRIMMABLE_CODE_LEN,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.errors import (
    code_not_shortenable,
    invalid_full_code,
    invalid_short_code,
)


# A code may drop digits only while the reference lies well inside the
# area the dropped digits describe.
_SAFETY_FACTOR = 0.3


def shorten(code: str, latitude: float, longitude: float) -> str:
    """Remove as many leading digits as the reference location allows.

    Returns the code unchanged (upper-cased) when the reference is too far
    away to drop anything.
    """

    if not is_full(code):
        raise invalid_full_code(code)
    if PADDING_CHARACTER in code:
        raise code_not_shortenable(code, "padded codes cannot be shortened")

    code = code.upper()
    code_area = decode(code)
    if code_area.code_length < MIN_TRIMMABLE_CODE_LEN:
        raise code_not_shortenable(
            code, f"code length must be at least {MIN_TRIMMABLE_CODE_LEN}"
        )

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    coderange = max(
        abs(code_area.latitude_center - latitude),
        abs(code_area.longitude_center - longitude),
    )

    # Try the longest trim first: 6 digits, then 4, then 2.
    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        if coderange < PAIR_RESOLUTIONS[i] * _SAFETY_FACTOR:
            return code[(i + 1) * 2 :]
    return code


def recover_nearest(
    code: str, reference_latitude: float, reference_longitude: float
) -> str:
    """Restore a short code to the full code closest to the reference.

    Full codes are returned upper-cased as they are. The missing prefix is
    borrowed from the reference location; when that puts the area more than
    half a cell away from the reference, it is moved one cell towards it.
    """

    if not is_short(code):
        if is_full(code):
            return code.upper()
        raise invalid_short_code(code)

    reference_latitude = clip_latitude(reference_latitude)
    reference_longitude = normalize_longitude(reference_longitude)

    code = code.upper()
    padding_length = SEPARATOR_POSITION - code.find(SEPARATOR)
    # Size in degrees of the area the missing digits identify.
    resolution = ENCODING_BASE ** (2 - padding_length // 2)
    half_resolution = resolution / 2.0

    prefix = encode(reference_latitude, reference_longitude)[:padding_length]
    code_area = decode(prefix + code)

    latitude = code_area.latitude_center
    longitude = code_area.longitude_center

    if (
        reference_latitude + half_resolution < latitude
        and latitude - resolution >= -LATITUDE_MAX
    ):
        latitude -= resolution
    elif (
        reference_latitude - half_resolution > latitude
        and latitude + resolution <= LATITUDE_MAX
    ):
        latitude += resolution

    if reference_longitude + half_resolution < longitude:
        longitude -= resolution
    elif reference_longitude - half_resolution > longitude:
        longitude += resolution

    return encode(latitude, longitude, code_area.code_length)
