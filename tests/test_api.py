import pytest

from inventory_service.api.dependencies import get_buyer_service
from inventory_service.main import app

BUYER = {"card_number_id": "123", "first_name": "A", "last_name": "B"}

WAREHOUSE = {
    "address": "Rua A",
    "telephone": "+5511999999999",
    "warehouse_code": "WH-1",
    "minimum_capacity": 10,
    "minimum_temperature": -5,
    "locality_id": 1,
}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_create_and_get_buyer(client):
    r = client.post("/api/v1/buyers", json=BUYER)
    assert r.status_code == 201, r.text
    created = r.json()["data"]
    assert created == {"id": 1, **BUYER}

    r = client.get(f"/api/v1/buyers/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"data": created}

    r = client.get("/api/v1/buyers")
    assert r.json() == {"data": [created]}


def test_missing_fields_are_unprocessable(client):
    r = client.post("/api/v1/buyers", json={"first_name": "A"})
    assert r.status_code == 422
    assert r.json() == {
        "code": "unprocessable_entity",
        "message": ["'card_number_id' is required", "'last_name' is required"],
    }


def test_malformed_body_is_unprocessable(client):
    r = client.post(
        "/api/v1/buyers",
        content=b'{"first_name": ',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 422
    assert r.json()["message"][0].startswith("syntax error at")


def test_invalid_id_is_a_bad_request(client):
    r = client.get("/api/v1/buyers/abc")
    assert r.status_code == 400
    assert r.json() == {"code": "bad_request", "message": ["the id 'abc' is invalid"]}


def test_unknown_buyer_is_not_found(client):
    r = client.get("/api/v1/buyers/42")
    assert r.status_code == 404
    assert r.json() == {"code": "not_found", "message": ["buyer not found with id 42"]}


def test_duplicate_buyer_conflicts(client):
    assert client.post("/api/v1/buyers", json=BUYER).status_code == 201

    r = client.post("/api/v1/buyers", json=BUYER)
    assert r.status_code == 409
    assert r.json()["code"] == "conflict"
    assert "123" in r.json()["message"][0]


def test_patch_buyer(client):
    client.post("/api/v1/buyers", json=BUYER)

    r = client.patch("/api/v1/buyers/1", json={"first_name": "Cleber"})
    assert r.status_code == 200, r.text
    assert r.json()["data"] == {"id": 1, "card_number_id": "123", "first_name": "Cleber", "last_name": "B"}


def test_blank_patch_is_a_bad_request(client):
    client.post("/api/v1/buyers", json=BUYER)

    r = client.patch("/api/v1/buyers/1", json={})
    assert r.status_code == 400
    assert r.json()["code"] == "bad_request"
    assert "card_number_id, first_name, last_name" in r.json()["message"][0]


def test_delete_buyer(client):
    client.post("/api/v1/buyers", json=BUYER)

    r = client.delete("/api/v1/buyers/1")
    assert r.status_code == 204
    assert client.get("/api/v1/buyers/1").status_code == 404
    assert client.delete("/api/v1/buyers/1").status_code == 404


def test_warehouse_with_unknown_locality_conflicts(client):
    r = client.post("/api/v1/warehouses", json={**WAREHOUSE, "locality_id": 99})
    assert r.status_code == 409
    assert r.json() == {"code": "conflict", "message": ["locality not found with id 99"]}
    assert client.get("/api/v1/warehouses").json() == {"data": []}


def test_warehouse_telephone_must_be_e164(client, reference_data):
    r = client.post("/api/v1/warehouses", json={**WAREHOUSE, "telephone": "Phone"})
    assert r.status_code == 422
    assert "+5500123456789" in r.json()["message"][0]


def test_warehouse_lifecycle(client, reference_data):
    r = client.post("/api/v1/warehouses", json=WAREHOUSE)
    assert r.status_code == 201, r.text

    r = client.patch("/api/v1/warehouses/1", json={"minimum_capacity": 20, "locality_id": 1})
    assert r.status_code == 200, r.text
    assert r.json()["data"]["minimum_capacity"] == 20
    assert r.json()["data"]["warehouse_code"] == "WH-1"

    r = client.patch("/api/v1/warehouses/1", json={"locality_id": 5})
    assert r.status_code == 409
    assert r.json()["message"] == ["locality not found with id 5"]


def test_locality_requires_existing_province(client, reference_data):
    r = client.post("/api/v1/localities", json={"locality_name": "Santos", "province_id": 1})
    assert r.status_code == 201, r.text
    assert r.json()["data"] == {"id": 2, "locality_name": "Santos", "province_id": 1}

    r = client.post("/api/v1/localities", json={"locality_name": "Recife", "province_id": 9})
    assert r.status_code == 409
    assert r.json()["message"] == ["province not found with id 9"]


def test_product_record_dates_round_trip(client, reference_data):
    client.post("/api/v1/sellers", json={
        "cid": 1,
        "company_name": "Meli",
        "address": "Rua B",
        "telephone": "+5511988887777",
        "locality_id": 1,
    })
    r = client.post("/api/v1/products", json={
        "description": "Ice cream",
        "expiration_rate": 0.5,
        "freezing_rate": 0.3,
        "height": 10,
        "length": 20,
        "netweight": 1.5,
        "product_code": "P-1",
        "recommended_freezing_temperature": -18,
        "width": 15,
        "product_type_id": 1,
        "seller_id": 1,
    })
    assert r.status_code == 201, r.text

    record = {
        "last_update_date": "2021-01-01 01:00:00",
        "purchase_price": 10.0,
        "sale_price": 15.0,
        "product_id": 1,
    }
    r = client.post("/api/v1/product-records", json=record)
    assert r.status_code == 201, r.text
    assert r.json()["data"]["last_update_date"] == "2021-01-01 01:00:00"

    r = client.get("/api/v1/product-records/1")
    assert r.json()["data"] == {"id": 1, **record}

    r = client.post("/api/v1/product-records", json=record)
    assert r.status_code == 409


def test_product_record_rejects_bad_date(client):
    r = client.post("/api/v1/product-records", json={
        "last_update_date": "01/01/2021",
        "purchase_price": 10.0,
        "sale_price": 15.0,
        "product_id": 1,
    })
    assert r.status_code == 422
    assert "yyyy-MM-dd HH:mm:ss" in r.json()["message"][0]


def test_purchase_order_reports_first_missing_dependency(client):
    r = client.post("/api/v1/purchase-orders", json={
        "order_number": "PO-1",
        "order_date": "2021-01-01 01:00:00",
        "tracking_code": "TRK",
        "buyer_id": 7,
        "order_status_id": 1,
        "warehouse_id": 1,
        "product_record_id": 1,
        "carrier_id": 1,
    })
    assert r.status_code == 409
    assert r.json()["message"] == ["buyer not found with id 7"]


def test_unexpected_error_is_an_internal_error(client):
    failing = type("FailingService", (), {"get_all": lambda self: 1 / 0})()
    app.dependency_overrides[get_buyer_service] = lambda: failing

    r = client.get("/api/v1/buyers")
    assert r.status_code == 500
    assert r.json() == {"code": "internal_server_error", "message": ["an internal error occurred"]}


@pytest.mark.parametrize("path", [
    "/api/v1/localities/1",
    "/api/v1/carriers/1",
    "/api/v1/product-batches/1",
    "/api/v1/product-records/1",
    "/api/v1/purchase-orders/1",
    "/api/v1/inbound-orders/1",
])
def test_read_only_resources_report_not_found(client, path):
    r = client.get(path)
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"


SELLER = {
    "cid": 1,
    "company_name": "Meli",
    "address": "Rua B",
    "telephone": "+5511988887777",
    "locality_id": 1,
}

PRODUCT = {
    "description": "Ice cream",
    "expiration_rate": 0.5,
    "freezing_rate": 0.3,
    "height": 10,
    "length": 20,
    "netweight": 1.5,
    "product_code": "P-1",
    "recommended_freezing_temperature": -18,
    "width": 15,
    "product_type_id": 1,
    "seller_id": 1,
}


@pytest.mark.parametrize("raw", ["99999999999999999999999", "9223372036854775808", "-9223372036854775809"])
def test_id_outside_64_bits_is_a_bad_request(client, raw):
    r = client.patch(f"/api/v1/buyers/{raw}", json={"first_name": "Cleber"})
    assert r.status_code == 400
    assert r.json() == {"code": "bad_request", "message": [f"the id '{raw}' is invalid"]}


def test_largest_64_bit_id_is_looked_up(client):
    r = client.get("/api/v1/buyers/9223372036854775807")
    assert r.status_code == 404


def test_integer_field_outside_64_bits_is_unprocessable(client, reference_data):
    r = client.post("/api/v1/warehouses", json={**WAREHOUSE, "locality_id": 10**30})
    assert r.status_code == 422
    assert r.json() == {"code": "unprocessable_entity", "message": ["field 'locality_id' must be 'int'"]}


def test_sellers_by_locality_report(client, reference_data):
    client.post("/api/v1/localities", json={"locality_name": "Santos", "province_id": 1})
    assert client.post("/api/v1/sellers", json=SELLER).status_code == 201

    r = client.get("/api/v1/localities/report-sellers")
    assert r.status_code == 200, r.text
    assert r.json() == {"data": [
        {"locality_id": 1, "locality_name": "Campinas", "sellers_count": 1},
        {"locality_id": 2, "locality_name": "Santos", "sellers_count": 0},
    ]}

    r = client.get("/api/v1/localities/report-sellers", params={"id": 2})
    assert r.json() == {"data": {"locality_id": 2, "locality_name": "Santos", "sellers_count": 0}}


def test_carriers_by_locality_report(client, reference_data):
    r = client.post("/api/v1/carriers", json={
        "cid": "CAR-1",
        "company_name": "Rapido",
        "address": "Rua C",
        "telephone": "+5511977776666",
        "locality_id": 1,
    })
    assert r.status_code == 201, r.text

    r = client.get("/api/v1/localities/report-carriers", params={"id": 1})
    assert r.status_code == 200
    assert r.json() == {"data": {"locality_id": 1, "locality_name": "Campinas", "carriers_count": 1}}


def test_records_by_product_report(client, reference_data):
    client.post("/api/v1/sellers", json=SELLER)
    client.post("/api/v1/products", json=PRODUCT)
    for date in ("2021-01-01 01:00:00", "2021-02-01 01:00:00"):
        r = client.post("/api/v1/product-records", json={
            "last_update_date": date,
            "purchase_price": 10.0,
            "sale_price": 15.0,
            "product_id": 1,
        })
        assert r.status_code == 201, r.text

    r = client.get("/api/v1/product-records/report")
    assert r.json() == {"data": [{"product_id": 1, "description": "Ice cream", "records_count": 2}]}

    r = client.get("/api/v1/product-records/report", params={"id": 7})
    assert r.status_code == 404
    assert r.json()["message"] == ["product not found with id 7"]


def test_products_by_section_report(client, reference_data):
    client.post("/api/v1/warehouses", json=WAREHOUSE)
    client.post("/api/v1/sellers", json=SELLER)
    client.post("/api/v1/products", json=PRODUCT)
    for number in (7, 8):
        r = client.post("/api/v1/sections", json={
            "section_number": number,
            "current_temperature": -4.5,
            "minimum_temperature": -10.0,
            "current_capacity": 40,
            "minimum_capacity": 10,
            "maximum_capacity": 100,
            "warehouse_id": 1,
            "product_type_id": 1,
        })
        assert r.status_code == 201, r.text
    r = client.post("/api/v1/product-batches", json={
        "batch_number": 100,
        "current_quantity": 50,
        "current_temperature": -5.0,
        "due_date": "2022-01-01 00:00:00",
        "initial_quantity": 60,
        "manufacturing_date": "2021-12-01 00:00:00",
        "manufacturing_hour": 8,
        "minimum_temperature": -12.0,
        "product_id": 1,
        "section_id": 1,
    })
    assert r.status_code == 201, r.text

    r = client.get("/api/v1/sections/report-products")
    assert r.json() == {"data": [
        {"section_id": 1, "section_number": 7, "products_count": 1},
        {"section_id": 2, "section_number": 8, "products_count": 0},
    ]}


@pytest.mark.parametrize("path, message", [
    ("/api/v1/localities/report-sellers", "locality not found with id 99"),
    ("/api/v1/localities/report-carriers", "locality not found with id 99"),
    ("/api/v1/sections/report-products", "section not found with id 99"),
    ("/api/v1/product-records/report", "product not found with id 99"),
])
def test_report_for_unknown_id_is_not_found(client, path, message):
    r = client.get(path, params={"id": 99})
    assert r.status_code == 404
    assert r.json() == {"code": "not_found", "message": [message]}


def test_report_with_invalid_id_is_a_bad_request(client):
    r = client.get("/api/v1/sections/report-products", params={"id": "abc"})
    assert r.status_code == 400
    assert r.json()["message"] == ["the id 'abc' is invalid"]


def test_reports_are_empty_without_data(client):
    assert client.get("/api/v1/localities/report-sellers").json() == {"data": []}
    assert client.get("/api/v1/product-records/report").json() == {"data": []}
