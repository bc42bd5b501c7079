"""Demo price data."""

from __future__ import annotations

import logging
import random
from decimal import Decimal

from sqlalchemy.orm import Session

from pricing_service.models.price import Price
from pricing_service.repositories.prices import PriceRepository

logger = logging.getLogger(__name__)

MIN_PRICE = 5_000
MAX_PRICE = 50_000


def random_price(rng: random.Random) -> Decimal:
    cents = rng.randrange(MIN_PRICE * 100, MAX_PRICE * 100)
    return Decimal(cents) / Decimal(100)


def seed_prices(db: Session, *, vehicle_count: int, random_seed: int, currency: str = "USD") -> int:
    """
    Insert one price per vehicle id 1..vehicle_count when the table is empty.

    Returns the number of rows inserted. The same random_seed always yields
    the same amounts.
    """
    if PriceRepository(db).count() > 0:
        return 0

    rng = random.Random(random_seed)
    rows = [
        Price(vehicle_id=vehicle_id, currency=currency, price=random_price(rng))
        for vehicle_id in range(1, vehicle_count + 1)
    ]
    db.add_all(rows)
    db.commit()
    logger.info("Seeded %d prices", len(rows))
    return len(rows)
