# vehicles_api/routes/cars.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from vehicles_api.core.hal import HALJSONResponse, href
from vehicles_api.dependencies.services import get_car_service
from vehicles_api.schemas.car import CarCollection, CarCreate, CarList, CarRead, CarResource
from vehicles_api.services.car_service import CarNotFoundError, CarService, CarStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


# =========================================================
# Internal helpers
# =========================================================
def _to_resource(request: Request, car: CarRead) -> CarResource:
    links = {
        "self": href(request, "get_car", car_id=car.id),
        "cars": href(request, "list_cars"),
    }
    return CarResource(**car.model_dump(), links=links)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")


def _store_failed(action: str, e: CarStoreError) -> HTTPException:
    logger.exception("%s failed", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action} failed: {e}",
    )


# =========================================================
# READ
# =========================================================
@router.get("", response_model=CarCollection, response_class=HALJSONResponse)
def list_cars(request: Request, service: CarService = Depends(get_car_service)):
    """All cars, each with its current price and resolved address."""
    cars = [_to_resource(request, car) for car in service.list()]
    return CarCollection(
        embedded=CarList(car_list=cars),
        links={"self": href(request, "list_cars")},
    )


@router.get("/{car_id}", response_model=CarResource, response_class=HALJSONResponse)
def get_car(car_id: int, request: Request, service: CarService = Depends(get_car_service)):
    try:
        car = service.find_by_id(car_id)
    except CarNotFoundError:
        raise _not_found() from None
    return _to_resource(request, car)


# =========================================================
# WRITE
# =========================================================
@router.post(
    "",
    response_model=CarResource,
    response_class=HALJSONResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_car(
    data: CarCreate,
    request: Request,
    response: Response,
    service: CarService = Depends(get_car_service),
):
    # ids are assigned by the store
    try:
        car = service.save(data.model_copy(update={"id": None}))
    except CarStoreError as e:
        raise _store_failed("create_car", e) from None

    resource = _to_resource(request, car)
    response.headers["Location"] = resource.links["self"].href
    return resource


@router.put("/{car_id}", response_model=CarResource, response_class=HALJSONResponse)
def update_car(
    car_id: int,
    data: CarCreate,
    request: Request,
    service: CarService = Depends(get_car_service),
):
    try:
        car = service.save(data.model_copy(update={"id": car_id}))
    except CarNotFoundError:
        raise _not_found() from None
    except CarStoreError as e:
        raise _store_failed("update_car", e) from None
    return _to_resource(request, car)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    try:
        service.delete(car_id)
    except CarNotFoundError:
        raise _not_found() from None
    except CarStoreError as e:
        raise _store_failed("delete_car", e) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
