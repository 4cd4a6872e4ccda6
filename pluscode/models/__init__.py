"""SQLAlchemy ORM models.

Importing this module should register all tables on Base.metadata.
"""

from __future__ import annotations

from pluscode.models.place import Place

__all__ = [
    "Place",
]
