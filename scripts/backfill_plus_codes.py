import argparse
import logging

from pluscode.db.session import dispose_engine, session_scope
from pluscode.services.backfill import backfill_open_location_codes


async def main(*, only_missing: bool, batch_size: int | None) -> None:
    """Fill stored plus codes for places in PLUSCODE_DB_URL."""

    try:
        async with session_scope() as session:
            updated = await backfill_open_location_codes(
                session, only_missing=only_missing, batch_size=batch_size
            )
        print(f"updated={updated}")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    import asyncio

    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument(
        "--all",
        action="store_true",
        help="re-encode every located place, not only those without a code",
    )
    parser.add_argument("--batch-size", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(only_missing=not args.all, batch_size=args.batch_size))
