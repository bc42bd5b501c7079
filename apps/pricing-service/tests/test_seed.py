from decimal import Decimal

from pricing_service.db.seed import MAX_PRICE, MIN_PRICE, seed_prices
from pricing_service.models.base import Base
from pricing_service.repositories.prices import PriceRepository


def test_seed_inserts_one_price_per_vehicle(db_session):
    assert seed_prices(db_session, vehicle_count=20, random_seed=42) == 20

    repo = PriceRepository(db_session)
    assert repo.count() == 20
    for vehicle_id in range(1, 21):
        price = repo.find_by_vehicle_id(vehicle_id)
        assert price is not None
        assert price.currency == "USD"
        assert Decimal(MIN_PRICE) <= price.price < Decimal(MAX_PRICE)


def test_seed_skips_non_empty_table(db_session):
    seed_prices(db_session, vehicle_count=3, random_seed=42)
    assert seed_prices(db_session, vehicle_count=10, random_seed=42) == 0
    assert PriceRepository(db_session).count() == 3


def test_seed_is_reproducible(session_factory, engine):
    amounts = []
    for _ in range(2):
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        db = session_factory()
        try:
            seed_prices(db, vehicle_count=5, random_seed=7)
            amounts.append([PriceRepository(db).find_by_vehicle_id(v).price for v in range(1, 6)])
        finally:
            db.close()

    assert amounts[0] == amounts[1]
