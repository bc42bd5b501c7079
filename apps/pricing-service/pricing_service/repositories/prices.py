"""Data access for prices."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pricing_service.models.price import Price

logger = logging.getLogger(__name__)


class PriceRepository:
    """Read access to the prices table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, price_id: int) -> Optional[Price]:
        return self.db.get(Price, price_id)

    def find_by_vehicle_id(self, vehicle_id: int) -> Optional[Price]:
        """
        The price of a vehicle, or None.

        vehicle_id is not unique in the schema; when several rows match,
        the oldest one (lowest id) wins.
        """
        rows = self.db.execute(
            select(Price).where(Price.vehicle_id == vehicle_id).order_by(Price.id).limit(2)
        ).scalars().all()
        if len(rows) > 1:
            logger.warning("Several prices stored for vehicle %s; returning price %s", vehicle_id, rows[0].id)
        return rows[0] if rows else None

    def find_page(self, page: int, size: int) -> Tuple[List[Price], int]:
        total = self.count()
        items = self.db.execute(
            select(Price).order_by(Price.id).limit(size).offset(page * size)
        ).scalars().all()
        return list(items), total

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Price)).scalar_one()
