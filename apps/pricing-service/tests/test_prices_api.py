from pricing_service.db.seed import seed_prices


def test_get_price_by_id(client, add_price):
    row = add_price(1, "15234.50")

    r = client.get(f"/prices/{row.id}")
    assert r.status_code == 200, r.text
    assert r.headers["content-type"].startswith("application/hal+json")
    body = r.json()

    assert body["currency"] == "USD"
    assert body["vehicleId"] == 1
    assert body["price"] == 15234.5
    assert body["_links"]["self"]["href"] == f"http://testserver/prices/{row.id}"
    assert body["_links"]["price"]["href"] == body["_links"]["self"]["href"]
    assert "templated" not in body["_links"]["self"]


def test_get_missing_price_is_404(client):
    r = client.get("/prices/99")
    assert r.status_code == 404
    assert r.json()["detail"] == "Price not found"


def test_find_by_vehicle_id(client, add_price):
    add_price(1, "10000.00")
    row = add_price(2, "20000.00")

    r = client.get("/prices/search/findByVehicleId", params={"vehicleId": 2})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["vehicleId"] == 2
    assert body["currency"] == "USD"
    assert body["price"] == 20000.0
    assert body["_links"]["self"]["href"] == f"http://testserver/prices/{row.id}"


def test_find_by_vehicle_id_without_rows_is_404(client, add_price):
    add_price(1, "10000.00")
    r = client.get("/prices/search/findByVehicleId", params={"vehicleId": 5})
    assert r.status_code == 404


def test_find_by_vehicle_id_with_duplicates_returns_oldest(client, add_price):
    first = add_price(3, "100.00")
    add_price(3, "200.00")

    body = client.get("/prices/search/findByVehicleId", params={"vehicleId": 3}).json()
    assert body["price"] == 100.0
    assert body["_links"]["self"]["href"].endswith(f"/prices/{first.id}")


def test_find_by_vehicle_id_requires_parameter(client):
    assert client.get("/prices/search/findByVehicleId").status_code == 422


def test_search_links(client):
    r = client.get("/prices/search")
    assert r.status_code == 200
    links = r.json()["_links"]
    assert links["findByVehicleId"] == {
        "href": "http://testserver/prices/search/findByVehicleId{?vehicleId}",
        "templated": True,
    }
    assert links["self"]["href"] == "http://testserver/prices/search"


def test_list_prices_paginates(client, db_session):
    seed_prices(db_session, vehicle_count=5, random_seed=1)

    r = client.get("/prices", params={"page": 1, "size": 2})
    assert r.status_code == 200, r.text
    body = r.json()

    assert [p["vehicleId"] for p in body["_embedded"]["prices"]] == [3, 4]
    assert body["page"] == {"size": 2, "totalElements": 5, "totalPages": 3, "number": 1}
    assert body["_links"]["prev"]["href"].endswith("/prices?page=0&size=2")
    assert body["_links"]["next"]["href"].endswith("/prices?page=2&size=2")
    assert body["_links"]["search"]["href"] == "http://testserver/prices/search"


def test_list_prices_empty(client):
    body = client.get("/prices").json()
    assert body["_embedded"]["prices"] == []
    assert body["page"]["totalElements"] == 0
    assert "next" not in body["_links"]


def test_list_prices_rejects_oversized_page(client):
    assert client.get("/prices", params={"size": 500}).status_code == 422
