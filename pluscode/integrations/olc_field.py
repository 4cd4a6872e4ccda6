from __future__ import annotations

"""Keep a stored Plus Code in sync with a record's coordinates.

The ORM side only decides *when* a code must be recomputed (insert, or an
update touching latitude/longitude). *What* gets stored is delegated to a
CoordinateChangeHook, and the default hook only calls `encode`.
"""

import dataclasses
import logging
from typing import Any, Protocol

import sqlalchemy as sa
from sqlalchemy import event

from pluscode.codec.area import CodeArea
from pluscode.codec.decoder import decode
from pluscode.codec.encoder import encode
from pluscode.core.settings import get_settings


logger = logging.getLogger(__name__)


class CoordinateChangeHook(Protocol):
    def on_coordinate_change(
        self, latitude: float | None, longitude: float | None
    ) -> str | None: ...


@dataclasses.dataclass(frozen=True)
class EncodeOnChange:
    """Default hook: encode the new coordinates, or clear the code."""

    # None => settings.default_code_length at call time.
    code_length: int | None = None

    def on_coordinate_change(
        self, latitude: float | None, longitude: float | None
    ) -> str | None:
        if latitude is None or longitude is None:
            return None
        code_length = self.code_length or get_settings().default_code_length
        return encode(latitude, longitude, code_length)


@dataclasses.dataclass(frozen=True)
class OlcOptions:
    """Attribute names of the stored code and the coordinates it follows."""

    field: str = "open_location_code"
    latitude: str = "latitude"
    longitude: str = "longitude"
    hook: CoordinateChangeHook = dataclasses.field(default_factory=EncodeOnChange)


class OlcMixin:
    """Mixin for mapped classes that store a Plus Code next to lat/lng.

    Override `__olc__` on the model to rename the attributes or to pin a
    code length:

        class Place(OlcMixin, Base):
            __olc__ = OlcOptions(hook=EncodeOnChange(code_length=11))
    """

    __olc__ = OlcOptions()

    def olc_encode(self, code_length: int | None = None) -> str | None:
        options = self.__olc__
        latitude = getattr(self, options.latitude)
        longitude = getattr(self, options.longitude)
        if code_length is None:
            return options.hook.on_coordinate_change(latitude, longitude)
        return encode(latitude, longitude, code_length)

    def olc_decode(self) -> CodeArea:
        return decode(getattr(self, self.__olc__.field))

    def refresh_open_location_code(self) -> str | None:
        """Recompute and store the code from the current coordinates."""

        code = self.olc_encode()
        setattr(self, self.__olc__.field, code)
        return code


def _coordinates_changed(target: OlcMixin) -> bool:
    options = target.__olc__
    attrs = sa.inspect(target).attrs
    return (
        attrs[options.latitude].history.has_changes()
        or attrs[options.longitude].history.has_changes()
    )


@event.listens_for(OlcMixin, "before_insert", propagate=True)
def _olc_before_insert(mapper: Any, connection: Any, target: OlcMixin) -> None:
    options = target.__olc__
    # An imported code without coordinates is kept as given.
    if (
        getattr(target, options.latitude) is None
        and getattr(target, options.longitude) is None
        and getattr(target, options.field) is not None
    ):
        return
    target.refresh_open_location_code()


@event.listens_for(OlcMixin, "before_update", propagate=True)
def _olc_before_update(mapper: Any, connection: Any, target: OlcMixin) -> None:
    if not _coordinates_changed(target):
        return
    code = target.refresh_open_location_code()
    logger.debug(
        "Recomputed open location code (table=%s code=%s)",
        mapper.local_table.name,
        code,
    )
