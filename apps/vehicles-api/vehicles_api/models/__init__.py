"""
Models package.

Importing the model modules registers their tables on Base.metadata
(used by create_all at startup and by alembic).
"""

from __future__ import annotations

from vehicles_api.models import car  # noqa: F401
