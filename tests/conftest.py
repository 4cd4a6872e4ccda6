from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import pluscode.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def db_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    # Isolated sqlite DB per test.
    db_path = tmp_path / "test.db"
    url = f"sqlite+aiosqlite:///{db_path.as_posix()}"
    monkeypatch.setenv("PLUSCODE_DB_URL", url)
    monkeypatch.delenv("PLUSCODE_DEFAULT_CODE_LENGTH", raising=False)
    monkeypatch.delenv("PLUSCODE_BACKFILL_BATCH_SIZE", raising=False)

    # Clear settings cache and reset DB engine/sessionmaker.
    from pluscode.core.settings import get_settings

    get_settings.cache_clear()

    from pluscode.db import session as db_session

    db_session._engine = None  # noqa: SLF001
    db_session._sessionmaker = None  # noqa: SLF001

    yield url

    asyncio.run(db_session.dispose_engine())
    get_settings.cache_clear()


@pytest.fixture()
def db(db_url: str) -> str:
    """Like db_url, with the schema created from the ORM metadata."""

    # Import models so Base.metadata is fully populated.
    import pluscode.models  # noqa: F401

    from pluscode.db import session as db_session
    from pluscode.db.base import Base

    async def _init_schema() -> None:
        engine = db_session.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_init_schema())
    return db_url
