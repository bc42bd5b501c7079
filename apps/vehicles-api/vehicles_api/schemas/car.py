# vehicles_api/schemas/car.py

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vehicles_api.models.car import Condition


class CamelModel(BaseModel):
    # JSON is camelCase; snake_case is accepted on input as well
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class Manufacturer(CamelModel):
    code: int
    name: Optional[str] = None


class Details(CamelModel):
    body: str = Field(min_length=1)
    model: str = Field(min_length=1)
    manufacturer: Manufacturer

    number_of_doors: Optional[int] = Field(default=None, ge=0)
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None


class Location(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    # resolved by the maps client, never persisted
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class CarBase(CamelModel):
    details: Details
    location: Location
    condition: Condition


class CarCreate(CarBase):
    # None → insert, otherwise update the car with this id
    id: Optional[int] = None


class CarRead(CarBase):
    id: int
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    # transient, filled from the pricing service on read
    price: Optional[str] = None


# =========================================================
# HAL representations
# =========================================================
class Link(BaseModel):
    href: str


class CarResource(CarRead):
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class CarList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    car_list: List[CarResource] = Field(default_factory=list, alias="carList")


class CarCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: CarList = Field(alias="_embedded")
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
