from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from vehicles_api.clients.maps import MapsClient
from vehicles_api.clients.prices import PriceClient
from vehicles_api.core.config import settings
from vehicles_api.db.session import get_db
from vehicles_api.services.car_service import CarService


# Clients hold a pooled httpx.Client, one per process
@lru_cache(maxsize=1)
def get_price_client() -> PriceClient:
    return PriceClient(settings.PRICING_ENDPOINT, timeout=settings.HTTP_TIMEOUT_SECONDS)


@lru_cache(maxsize=1)
def get_maps_client() -> MapsClient:
    return MapsClient(settings.MAPS_ENDPOINT, timeout=settings.HTTP_TIMEOUT_SECONDS)


def close_clients() -> None:
    if get_price_client.cache_info().currsize:
        get_price_client().close()
        get_price_client.cache_clear()
    if get_maps_client.cache_info().currsize:
        get_maps_client().close()
        get_maps_client.cache_clear()


def get_car_service(
    db: Session = Depends(get_db),
    prices: PriceClient = Depends(get_price_client),
    maps: MapsClient = Depends(get_maps_client),
) -> CarService:
    return CarService(db, prices, maps)
