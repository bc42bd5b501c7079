from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vehicles_api.clients.maps import MapsClient
from vehicles_api.clients.prices import PriceClient
from vehicles_api.db.session import get_db
from vehicles_api.dependencies.services import get_maps_client, get_price_client
from vehicles_api.main import app
from vehicles_api.models.base import Base

PRICING_URL = "http://pricing.test"


def example_car_payload() -> dict:
    return {
        "location": {"lat": 40.730610, "lon": -73.935242},
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"code": 101, "name": "Chevrolet"},
            "numberOfDoors": 4,
            "fuelType": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "modelYear": 2018,
            "productionYear": 2018,
            "externalColor": "white",
        },
        "condition": "USED",
    }


def pricing_handler(request: httpx.Request) -> httpx.Response:
    """Pricing service stand-in: every vehicle costs 10000 + its id, in USD."""
    assert request.url.path == "/prices/search/findByVehicleId"
    vehicle_id = int(request.url.params["vehicleId"])
    return httpx.Response(
        200,
        json={"currency": "USD", "price": 10000 + vehicle_id, "vehicleId": vehicle_id},
    )


def make_price_client(handler) -> PriceClient:
    return PriceClient(PRICING_URL, http=httpx.Client(transport=httpx.MockTransport(handler)))


@pytest.fixture()
def car_payload() -> dict:
    return example_car_payload()


@pytest.fixture()
def price_client_factory():
    created = []

    def _factory(handler) -> PriceClient:
        client = make_price_client(handler)
        created.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in created:
            client.close()


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def price_client():
    client = make_price_client(pricing_handler)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture()
def maps_client():
    return MapsClient()


@pytest.fixture()
def client(session_factory, price_client, maps_client):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_price_client] = lambda: price_client
    app.dependency_overrides[get_maps_client] = lambda: maps_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
