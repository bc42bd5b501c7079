"""
Models package.

Importing the model modules registers their tables on Base.metadata.
"""

from __future__ import annotations

from pricing_service.models import price  # noqa: F401
