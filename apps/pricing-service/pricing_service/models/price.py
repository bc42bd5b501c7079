from __future__ import annotations

from sqlalchemy import Column, Integer, Numeric, String

from pricing_service.models.base import Base


class Price(Base):
    """
    Price quote for a vehicle.

    vehicle_id is indexed but deliberately not unique; lookups by vehicle
    expect at most one row.
    """

    __tablename__ = "prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, nullable=False, index=True)
    currency = Column(String(3), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
