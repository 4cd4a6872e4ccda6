from __future__ import annotations

import logging

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from pluscode.core.settings import get_settings
from pluscode.models.place import Place


logger = logging.getLogger(__name__)


async def backfill_open_location_codes(
    session: AsyncSession,
    *,
    only_missing: bool = True,
    batch_size: int | None = None,
) -> int:
    """Compute stored codes for places in id order, one commit per batch.

    With only_missing=False every located place is re-encoded, which is how a
    change of `default_code_length` is rolled out. Returns the number of rows
    whose code changed.
    """

    if batch_size is None:
        batch_size = get_settings().backfill_batch_size
    if batch_size <= 0:
        raise ValueError("batch_size must be > 0")

    stmt = sa.select(Place).order_by(Place.id)
    if only_missing:
        stmt = stmt.where(
            Place.open_location_code.is_(None),
            Place.latitude.is_not(None),
            Place.longitude.is_not(None),
        )

    updated = 0
    last_id = 0
    while True:
        batch = (
            (await session.execute(stmt.where(Place.id > last_id).limit(batch_size)))
            .scalars()
            .all()
        )
        if not batch:
            break

        for place in batch:
            code = place.olc_encode()
            if code != place.open_location_code:
                place.open_location_code = code
                updated += 1
        last_id = batch[-1].id
        await session.commit()

    logger.info(
        "Backfilled open location codes (updated=%s only_missing=%s)",
        updated,
        only_missing,
    )
    return updated
