from __future__ import annotations

from dataclasses import dataclass, field

from pluscode.core.constants import LATITUDE_MAX, LONGITUDE_MAX


@dataclass(frozen=True)
class CodeArea:
    """Bounding box of a decoded code.

    Holds the lower-left and upper-right corners, the number of significant
    digits of the code it came from, and the derived center. The center is
    clamped to 90/180 so the north-east edge never yields an out-of-range
    coordinate.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int
    latitude_center: float = field(init=False)
    longitude_center: float = field(init=False)

    def __post_init__(self) -> None:
        # frozen=True: derived fields must bypass __setattr__.
        object.__setattr__(
            self,
            "latitude_center",
            min(
                self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2.0,
                LATITUDE_MAX,
            ),
        )
        object.__setattr__(
            self,
            "longitude_center",
            min(
                self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2.0,
                LONGITUDE_MAX,
            ),
        )

    @property
    def center(self) -> tuple[float, float]:
        return self.latitude_center, self.longitude_center

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (lat_lo, lng_lo, lat_hi, lng_hi)."""

        return self.latitude_lo, self.longitude_lo, self.latitude_hi, self.longitude_hi
