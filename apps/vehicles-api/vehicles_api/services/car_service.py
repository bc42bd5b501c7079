from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicles_api.clients.maps import MapsClient
from vehicles_api.clients.prices import PriceClient
from vehicles_api.models.car import Car
from vehicles_api.schemas.car import CarCreate, CarRead, Details, Location, Manufacturer

logger = logging.getLogger(__name__)


class CarNotFoundError(LookupError):
    """No car is stored under the requested id."""

    def __init__(self, car_id: int):
        super().__init__(f"Car {car_id} not found")
        self.car_id = car_id


class CarStoreError(RuntimeError):
    """The car store rejected or failed a write."""


# ============================================================
# Row <-> schema mapping
# ============================================================
def _to_schema(row: Car) -> CarRead:
    return CarRead(
        id=row.id,
        created_at=row.created_at,
        modified_at=row.modified_at,
        condition=row.condition,
        details=Details(
            body=row.body,
            model=row.model,
            manufacturer=Manufacturer(code=row.manufacturer_code, name=row.manufacturer_name),
            number_of_doors=row.number_of_doors,
            fuel_type=row.fuel_type,
            engine=row.engine,
            mileage=row.mileage,
            model_year=row.model_year,
            production_year=row.production_year,
            external_color=row.external_color,
        ),
        location=Location(lat=row.lat, lon=row.lon),
    )


def _apply(row: Car, car: CarCreate) -> None:
    """Copy every mutable field of `car` onto `row`. The id is left alone."""
    details = car.details
    row.condition = car.condition
    row.body = details.body
    row.model = details.model
    row.manufacturer_code = details.manufacturer.code
    row.manufacturer_name = details.manufacturer.name
    row.number_of_doors = details.number_of_doors
    row.fuel_type = details.fuel_type
    row.engine = details.engine
    row.mileage = details.mileage
    row.model_year = details.model_year
    row.production_year = details.production_year
    row.external_color = details.external_color
    row.lat = car.location.lat
    row.lon = car.location.lon


# ============================================================
# Service
# ============================================================
class CarService:
    """
    CRUD over the car store.

    Read paths enrich each car with its price and the resolved address of
    its location. Enrichment is recomputed on every read and never stored.
    """

    def __init__(self, db: Session, prices: PriceClient, maps: MapsClient):
        self.db = db
        self.prices = prices
        self.maps = maps

    def list(self) -> List[CarRead]:
        rows = self.db.execute(select(Car).order_by(Car.id)).scalars().all()
        return [self._enrich(_to_schema(row)) for row in rows]

    def find_by_id(self, car_id: int) -> CarRead:
        return self._enrich(_to_schema(self._get_row(car_id)))

    def save(self, car: CarCreate) -> CarRead:
        """
        Insert `car` when it has no id, otherwise replace the stored car
        with that id. Returns the stored state without enrichment.
        """
        if car.id is None:
            row = Car()
            _apply(row, car)
            self.db.add(row)
        else:
            row = self._get_row(car.id)
            _apply(row, car)

        self._commit("save", refresh=row)
        logger.info("Saved car %s", row.id)
        return _to_schema(row)

    def delete(self, car_id: int) -> None:
        row = self._get_row(car_id)
        self.db.delete(row)
        self._commit("delete")
        logger.info("Deleted car %s", car_id)

    # --------------------------------------------------------
    # internals
    # --------------------------------------------------------
    def _get_row(self, car_id: int) -> Car:
        row: Optional[Car] = self.db.get(Car, car_id)
        if row is None:
            raise CarNotFoundError(car_id)
        return row

    def _commit(self, action: str, refresh: Optional[Car] = None) -> None:
        try:
            self.db.commit()
            if refresh is not None:
                self.db.refresh(refresh)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise CarStoreError(f"{action} failed: {type(e).__name__}: {e}") from e

    def _enrich(self, car: CarRead) -> CarRead:
        price = self.prices.get_price(car.id)
        location = self.maps.get_address(car.location)
        return car.model_copy(update={"price": price, "location": location})
