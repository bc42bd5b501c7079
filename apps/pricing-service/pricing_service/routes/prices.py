# pricing_service/routes/prices.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from pricing_service.core.hal import HALJSONResponse, href
from pricing_service.core.pagination import PageQuery, SizeQuery, total_pages
from pricing_service.db.session import get_db
from pricing_service.models.price import Price
from pricing_service.repositories.prices import PriceRepository
from pricing_service.schemas.price import (
    PageMetadata,
    PriceCollection,
    PriceList,
    PriceResource,
    SearchResource,
)

router = APIRouter(prefix="/prices", tags=["prices"])


def get_price_repository(db: Session = Depends(get_db)) -> PriceRepository:
    return PriceRepository(db)


# =========================================================
# Internal helpers
# =========================================================
def _to_resource(request: Request, price: Price) -> PriceResource:
    self_link = href(request, "get_price", price_id=price.id)
    return PriceResource(
        currency=price.currency,
        price=float(price.price),
        vehicle_id=price.vehicle_id,
        links={"self": self_link, "price": self_link},
    )


def _found(price: Optional[Price]) -> Price:
    if price is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Price not found")
    return price


# =========================================================
# Collection: GET /prices
# =========================================================
@router.get(
    "",
    response_model=PriceCollection,
    response_class=HALJSONResponse,
    response_model_exclude_none=True,
)
def list_prices(
    request: Request,
    page: int = PageQuery,
    size: int = SizeQuery,
    repo: PriceRepository = Depends(get_price_repository),
):
    items, total = repo.find_page(page, size)
    pages = total_pages(total, size)

    links = {
        "self": href(request, "list_prices", query={"page": page, "size": size}),
        "search": href(request, "search_prices"),
    }
    if page > 0:
        links["prev"] = href(request, "list_prices", query={"page": page - 1, "size": size})
    if page + 1 < pages:
        links["next"] = href(request, "list_prices", query={"page": page + 1, "size": size})

    return PriceCollection(
        embedded=PriceList(prices=[_to_resource(request, p) for p in items]),
        links=links,
        page=PageMetadata(size=size, total_elements=total, total_pages=pages, number=page),
    )


# =========================================================
# Search (declared before /{price_id})
# =========================================================
@router.get(
    "/search",
    response_model=SearchResource,
    response_class=HALJSONResponse,
    response_model_exclude_none=True,
)
def search_prices(request: Request):
    return SearchResource(
        links={
            "findByVehicleId": href(request, "find_by_vehicle_id", template="{?vehicleId}"),
            "self": href(request, "search_prices"),
        }
    )


@router.get(
    "/search/findByVehicleId",
    response_model=PriceResource,
    response_class=HALJSONResponse,
    response_model_exclude_none=True,
)
def find_by_vehicle_id(
    request: Request,
    vehicle_id: int = Query(..., alias="vehicleId"),
    repo: PriceRepository = Depends(get_price_repository),
):
    return _to_resource(request, _found(repo.find_by_vehicle_id(vehicle_id)))


# =========================================================
# Item: GET /prices/{price_id}
# =========================================================
@router.get(
    "/{price_id}",
    response_model=PriceResource,
    response_class=HALJSONResponse,
    response_model_exclude_none=True,
)
def get_price(price_id: int, request: Request, repo: PriceRepository = Depends(get_price_repository)):
    return _to_resource(request, _found(repo.get(price_id)))
