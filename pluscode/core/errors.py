from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True)
class OLCError(ValueError):
    """Codec error carrying a stable machine-readable code."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidCodeLength(OLCError):
    pass


class InvalidFullCode(OLCError):
    pass


class InvalidShortCode(OLCError):
    pass


class CodeNotShortenable(OLCError):
    pass


def invalid_code_length(code_length: int) -> InvalidCodeLength:
    return InvalidCodeLength(
        code="INVALID_CODE_LENGTH",
        message=f"Invalid Open Location Code length: {code_length}",
        details={"code_length": code_length},
    )


def invalid_full_code(code: str | None) -> InvalidFullCode:
    return InvalidFullCode(
        code="INVALID_FULL_CODE",
        message=f"Passed Open Location Code is not a valid full code: {code}",
        details={"open_location_code": code},
    )


def invalid_short_code(code: str | None) -> InvalidShortCode:
    return InvalidShortCode(
        code="INVALID_SHORT_CODE",
        message=f"Passed short code is not valid: {code}",
        details={"open_location_code": code},
    )


def code_not_shortenable(code: str, reason: str) -> CodeNotShortenable:
    return CodeNotShortenable(
        code="CODE_NOT_SHORTENABLE",
        message=f"Cannot shorten {code}: {reason}",
        details={"open_location_code": code, "reason": reason},
    )
