from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Float, Integer, String

from vehicles_api.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Condition(str, enum.Enum):
    NEW = "NEW"
    USED = "USED"


class Car(Base):
    """
    Car listing.

    Details and the manufacturer value are owned by the car and stored
    on the same row. Only lat/lon of the location are persisted; the
    address fields are resolved at read time.
    """

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)

    condition = Column(Enum(Condition, name="car_condition"), nullable=False)

    # details
    body = Column(String(64), nullable=False)
    model = Column(String(128), nullable=False)
    manufacturer_code = Column(Integer, nullable=False, index=True)
    manufacturer_name = Column(String(128), nullable=True)
    number_of_doors = Column(Integer, nullable=True)
    fuel_type = Column(String(64), nullable=True)
    engine = Column(String(64), nullable=True)
    mileage = Column(Integer, nullable=True)
    model_year = Column(Integer, nullable=True)
    production_year = Column(Integer, nullable=True)
    external_color = Column(String(64), nullable=True)

    # location
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    modified_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
