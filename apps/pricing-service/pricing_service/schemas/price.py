# pricing_service/schemas/price.py

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    href: str
    templated: Optional[bool] = None


class PriceResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    currency: str
    price: float
    vehicle_id: int = Field(alias="vehicleId")

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class PriceList(BaseModel):
    prices: List[PriceResource] = Field(default_factory=list)


class PageMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: int = Field(ge=1)
    total_elements: int = Field(ge=0, alias="totalElements")
    total_pages: int = Field(ge=0, alias="totalPages")
    number: int = Field(ge=0)


class PriceCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: PriceList = Field(alias="_embedded")
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    page: PageMetadata


class SearchResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
