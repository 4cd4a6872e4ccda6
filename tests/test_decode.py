from __future__ import annotations

import pytest

from pluscode import CodeArea, InvalidFullCode, decode, encode
from pluscode.codec.decoder import decode_grid, decode_pairs, strip_code
from pluscode.core.constants import CODE_ALPHABET, GRID_COLUMNS
from vectors import load_vectors


@pytest.mark.parametrize(
    ("code", "length", "lat_lo", "lng_lo", "lat_hi", "lng_hi"),
    load_vectors("decoding_tests.csv"),
)
def test_decode_matches_reference_bounds(
    code: str,
    length: str,
    lat_lo: str,
    lng_lo: str,
    lat_hi: str,
    lng_hi: str,
) -> None:
    area = decode(code)

    assert area.code_length == int(length)
    assert area.latitude_lo == pytest.approx(float(lat_lo), abs=1e-10)
    assert area.longitude_lo == pytest.approx(float(lng_lo), abs=1e-10)
    assert area.latitude_hi == pytest.approx(float(lat_hi), abs=1e-10)
    assert area.longitude_hi == pytest.approx(float(lng_hi), abs=1e-10)


def test_decode_literal_center() -> None:
    area = decode("8FVC9G8F+6XQH")

    assert area.code_length == 12
    # Both grid digits are decoded; the high bound is not the low bound.
    assert area.latitude_hi > area.latitude_lo
    assert area.latitude_center == pytest.approx(47.3655875, abs=1e-9)
    assert area.longitude_center == pytest.approx(8.52499609375, abs=1e-9)


def test_decode_is_case_insensitive_and_leaves_input_alone() -> None:
    code = "8fvc9g8f+6xqh"
    assert decode(code) == decode("8FVC9G8F+6XQH")
    assert code == "8fvc9g8f+6xqh"


@pytest.mark.parametrize(
    "code",
    [
        "",
        None,
        "9G8F+6X",  # short
        "8FVC9G8F6X",  # no separator
        "8FVC9G8F+6",  # one digit after the separator
        "WFVC9G8F+6X",  # latitude past the pole
        "8XVC9G8F+6X",  # longitude past the antimeridian
        "8FVC9G8A+6X",  # not in the alphabet
    ],
)
def test_decode_rejects_non_full_codes(code: str | None) -> None:
    with pytest.raises(InvalidFullCode) as exc_info:
        decode(code)  # type: ignore[arg-type]

    assert exc_info.value.code == "INVALID_FULL_CODE"


def test_strip_code_removes_separator_and_padding() -> None:
    assert strip_code("7fg49q00+") == "7FG49Q"
    assert strip_code("8FVC9G8F+6X") == "8FVC9G8F6X"


def test_decode_pairs_uses_interleaved_digits() -> None:
    area = decode_pairs("7FG49Q")

    assert area.code_length == 6
    assert area.latitude_lo == pytest.approx(20.35)
    assert area.longitude_lo == pytest.approx(2.75)


@pytest.mark.parametrize("value", range(len(CODE_ALPHABET)))
def test_grid_digit_inverts_row_col_mapping(value: int) -> None:
    area = decode_grid(CODE_ALPHABET[value])
    row, col = value // GRID_COLUMNS, value % GRID_COLUMNS

    assert area.code_length == 1
    assert area.latitude_lo == pytest.approx(row * 0.000025, abs=1e-15)
    assert area.longitude_lo == pytest.approx(col * 0.00003125, abs=1e-15)
    assert row * GRID_COLUMNS + col == value


def test_grid_area_is_offset_from_pair_low_corner() -> None:
    pairs = decode("8FVC9G8F+6X")
    refined = decode("8FVC9G8F+6XQH")

    eps = 1e-12
    assert pairs.latitude_lo - eps <= refined.latitude_lo < refined.latitude_hi
    assert refined.latitude_hi <= pairs.latitude_hi + eps
    assert pairs.longitude_lo - eps <= refined.longitude_lo < refined.longitude_hi
    # "H" sits in the last column, so the east edges coincide.
    assert refined.longitude_hi == pytest.approx(pairs.longitude_hi, abs=eps)


def test_code_area_is_immutable_and_keeps_high_bound() -> None:
    area = CodeArea(1.0, 2.0, 3.0, 4.0, 4)

    assert area.latitude_hi == 3.0
    assert area.center == (2.0, 3.0)
    assert area.bounds == (1.0, 2.0, 3.0, 4.0)
    with pytest.raises(AttributeError):
        area.latitude_hi = 5.0  # type: ignore[misc]


def test_code_area_center_is_clamped_to_pole_and_antimeridian() -> None:
    area = CodeArea(89.0, 179.0, 93.0, 183.0, 4)

    assert area.latitude_center == 90
    assert area.longitude_center == 180


def test_decode_then_encode_center_reproduces_code() -> None:
    area = decode("4VCPPQGP+Q9")
    assert encode(area.latitude_center, area.longitude_center, area.code_length) == (
        "4VCPPQGP+Q9"
    )
