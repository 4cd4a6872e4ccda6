"""Open Location Code ("Plus Code") encoding and decoding.

    >>> from pluscode import encode, decode
    >>> encode(47.365590, 8.524997, 12)
    '8FVC9G8F+6XQH'
    >>> area = decode('8FVC9G8F+6XQH')

Short codes:

    >>> from pluscode import shorten, recover_nearest
    >>> shorten('9C3W9QCJ+2VX', 51.3701125, -1.217765625)
    '+2VX'
"""

from __future__ import annotations

from pluscode.codec.area import CodeArea
from pluscode.codec.decoder import decode
from pluscode.codec.encoder import encode
from pluscode.codec.normalize import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
)
from pluscode.codec.shortcode import recover_nearest, shorten
from pluscode.codec.validator import is_full, is_short, is_valid
from pluscode.core.constants import CODE_ALPHABET
from pluscode.core.errors import (
    CodeNotShortenable,
    InvalidCodeLength,
    InvalidFullCode,
    InvalidShortCode,
    OLCError,
)


def alphabet() -> str:
    """Return the 20 code digits in value order."""

    return CODE_ALPHABET


__all__ = [
    "CodeArea",
    "CodeNotShortenable",
    "InvalidCodeLength",
    "InvalidFullCode",
    "InvalidShortCode",
    "OLCError",
    "alphabet",
    "clip_latitude",
    "compute_latitude_precision",
    "decode",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "normalize_longitude",
    "recover_nearest",
    "shorten",
]
