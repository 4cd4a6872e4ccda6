from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from pluscode.db.base import Base, TimestampMixin
from pluscode.integrations.olc_field import OlcMixin


class Place(OlcMixin, TimestampMixin, Base):
    __tablename__ = "places"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(sa.Text, nullable=False)

    # WGS84; a place may be saved before it is located.
    latitude: Mapped[float | None] = mapped_column(sa.Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(sa.Float, nullable=True)

    # Maintained by OlcMixin on insert and on coordinate changes.
    # Text: encode emits every requested grid digit.
    open_location_code: Mapped[str | None] = mapped_column(
        sa.Text, nullable=True, index=True
    )
