from __future__ import annotations

"""Fixed numeral system and geometry of the Open Location Code."""

from typing import Final

SEPARATOR: Final = "+"
# Number of digits before the separator in a full code.
SEPARATOR_POSITION: Final = 8
PADDING_CHARACTER: Final = "0"

# Index in the string is the digit value.
CODE_ALPHABET: Final = "23456789CFGHJMPQRVWX"
ENCODING_BASE: Final = len(CODE_ALPHABET)

LATITUDE_MAX: Final = 90
LONGITUDE_MAX: Final = 180

# Digits produced by lat/lng pair encoding (~13x13m at the equator).
PAIR_CODE_LENGTH: Final = 10

# Place value in degrees of each pair position.
PAIR_RESOLUTIONS: Final = (20.0, 1.0, 0.05, 0.0025, 0.000125)

GRID_COLUMNS: Final = 4
GRID_ROWS: Final = 5
# Size of the cell the first grid digit subdivides.
GRID_SIZE_DEGREES: Final = 0.000125

MIN_TRIMMABLE_CODE_LEN: Final = 6
