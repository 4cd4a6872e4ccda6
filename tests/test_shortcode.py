from __future__ import annotations

import pytest

from pluscode import (
    CodeNotShortenable,
    InvalidFullCode,
    InvalidShortCode,
    recover_nearest,
    shorten,
)
from vectors import load_vectors


SHORT_CODE_VECTORS = load_vectors("short_code_tests.csv")


@pytest.mark.parametrize(("full", "latitude", "longitude", "short"), SHORT_CODE_VECTORS)
def test_shorten(full: str, latitude: str, longitude: str, short: str) -> None:
    assert shorten(full, float(latitude), float(longitude)) == short


@pytest.mark.parametrize(("full", "latitude", "longitude", "short"), SHORT_CODE_VECTORS)
def test_recover_nearest(full: str, latitude: str, longitude: str, short: str) -> None:
    assert recover_nearest(short, float(latitude), float(longitude)) == full


def test_shorten_is_case_insensitive() -> None:
    assert shorten("9c3w9qcj+2vx", 51.3701125, -1.217765625) == "+2VX"


def test_shorten_rejects_short_and_invalid_codes() -> None:
    with pytest.raises(InvalidFullCode):
        shorten("9QCJ+2VX", 51.3, -1.2)
    with pytest.raises(InvalidFullCode):
        shorten("not a code", 51.3, -1.2)


def test_shorten_rejects_padded_codes() -> None:
    with pytest.raises(CodeNotShortenable) as exc_info:
        shorten("9C3W0000+", 51.3, -1.2)

    assert exc_info.value.code == "CODE_NOT_SHORTENABLE"


def test_recover_nearest_returns_full_codes_upper_cased() -> None:
    assert recover_nearest("9c3w9qcj+2vx", 0.0, 0.0) == "9C3W9QCJ+2VX"


def test_recover_nearest_rejects_invalid_codes() -> None:
    with pytest.raises(InvalidShortCode) as exc_info:
        recover_nearest("9QCJ+2V+X", 51.3, -1.2)

    assert exc_info.value.code == "INVALID_SHORT_CODE"


def test_recover_nearest_moves_across_longitude_cell_boundary() -> None:
    # The reference's own prefix (9C3X) lies more than half a degree east of
    # the reference; the nearest match is one cell west.
    assert recover_nearest("9QCJ+2VX", 51.3701125, -0.8) == "9C3W9QCJ+2VX"


def test_recover_nearest_moves_across_latitude_cell_boundary() -> None:
    assert recover_nearest("9QCJ+2VX", 51.9, -1.217765625) == "9C4W9QCJ+2VX"


def test_recover_nearest_wraps_the_antimeridian() -> None:
    # Reference just west of 180; the code's cell lies just east of -180.
    assert recover_nearest("2222+22", 0.5, 179.9) == "62G22222+22"
