from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pricing.main import create_app
from pricing.repository import Price, PriceRepository, generate_prices


@pytest.fixture
def api_client() -> TestClient:
    repository = PriceRepository([Price(currency="USD", price=Decimal("30987.04"), vehicle_id=4)])
    return TestClient(create_app(repository=repository))


def test_generate_prices_is_deterministic_and_bounded():
    first = generate_prices(range(1, 11), currency="USD", min_price=10_000, max_price=50_000, seed=7)
    second = generate_prices(range(1, 11), currency="USD", min_price=10_000, max_price=50_000, seed=7)

    assert first == second
    assert [price.vehicle_id for price in first] == list(range(1, 11))
    assert all(Decimal("10000") <= price.price <= Decimal("50000") for price in first)
    assert all(price.price == price.price.quantize(Decimal("0.01")) for price in first)


def test_generate_prices_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        generate_prices([1], currency="USD", min_price=10, max_price=1, seed=0)


def test_price_lookup_by_vehicle_id(api_client: TestClient):
    response = api_client.get("/services/price", params={"vehicleId": 4})

    assert response.status_code == 200
    payload = response.json()
    assert payload["currency"] == "USD"
    assert Decimal(str(payload["price"])) == Decimal("30987.04")
    assert payload["vehicleId"] == 4


def test_price_lookup_unknown_vehicle_is_404(api_client: TestClient):
    assert api_client.get("/services/price", params={"vehicleId": 5}).status_code == 404
    assert api_client.get("/prices/5").status_code == 404


def test_price_lookup_rejects_invalid_vehicle_id(api_client: TestClient):
    assert api_client.get("/services/price", params={"vehicleId": 0}).status_code == 422
    assert api_client.get("/services/price").status_code == 422


def test_list_prices(api_client: TestClient):
    payload = api_client.get("/prices").json()

    assert payload["total"] == 1
    assert payload["items"][0]["vehicleId"] == 4


def test_create_price_then_lookup(api_client: TestClient):
    response = api_client.post("/prices", json={"currency": "eur", "price": "25100.50", "vehicleId": 7})

    assert response.status_code == 201
    assert response.headers["Location"].endswith("/prices/7")
    payload = response.json()
    assert payload["currency"] == "EUR"
    assert Decimal(str(payload["price"])) == Decimal("25100.50")

    lookup = api_client.get("/services/price", params={"vehicleId": 7}).json()
    assert lookup["vehicleId"] == 7
    assert api_client.get("/prices").json()["total"] == 2


def test_create_price_for_priced_vehicle_is_conflict(api_client: TestClient):
    response = api_client.post("/prices", json={"currency": "USD", "price": "1.00", "vehicleId": 4})

    assert response.status_code == 409
    price = api_client.get("/prices/4").json()["price"]
    assert Decimal(str(price)) == Decimal("30987.04")


@pytest.mark.parametrize(
    "body",
    [
        {"currency": "USD", "price": "-1.00", "vehicleId": 9},
        {"currency": "DOLLARS", "price": "1.00", "vehicleId": 9},
        {"currency": "USD", "price": "1.001", "vehicleId": 9},
        {"currency": "USD", "price": "1.00", "vehicleId": 0},
        {"currency": "USD", "price": "1.00"},
    ],
)
def test_create_price_rejects_invalid_body(api_client: TestClient, body):
    assert api_client.post("/prices", json=body).status_code == 422
    assert api_client.get("/prices/9").status_code == 404


def test_update_price_replaces_existing_and_path_id_wins(api_client: TestClient):
    response = api_client.put("/prices/4", json={"currency": "USD", "price": "29999.99", "vehicleId": 12})

    assert response.status_code == 200
    assert response.json()["vehicleId"] == 4
    lookup = api_client.get("/services/price", params={"vehicleId": 4}).json()
    assert Decimal(str(lookup["price"])) == Decimal("29999.99")
    assert api_client.get("/prices/12").status_code == 404


def test_update_price_for_unpriced_vehicle_stores_it(api_client: TestClient):
    assert api_client.put("/prices/8", json={"currency": "GBP", "price": "18000.00"}).status_code == 200
    assert api_client.get("/prices/8").json()["currency"] == "GBP"


def test_delete_price(api_client: TestClient):
    assert api_client.delete("/prices/4").status_code == 204
    assert api_client.get("/services/price", params={"vehicleId": 4}).status_code == 404
    assert api_client.delete("/prices/4").status_code == 404


def test_repository_save_without_replace_keeps_existing_entry():
    original = Price(currency="USD", price=Decimal("100.00"), vehicle_id=1)
    repository = PriceRepository([original])

    assert repository.save(Price(currency="USD", price=Decimal("1.00"), vehicle_id=1), replace=False) is None
    assert repository.find_by_vehicle_id(1) == original
    assert repository.delete(1) is True
    assert repository.delete(1) is False
