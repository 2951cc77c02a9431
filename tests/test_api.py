import pytest

pytestmark = pytest.mark.api


FEBRUARY = {
    "is_always_available": False,
    "periods": [
        {"start_date": "2024-02-01", "end_date": "2024-02-05", "status": "available"},
        {"start_date": "2024-02-06", "end_date": "2024-02-10", "status": "rented"},
    ],
    "unavailable_dates": ["2024-02-04"],
}


def test_create_quote(client, price_model_data):
    resp = client.post(
        "/api/v1/quotes",
        json={
            "price_model": price_model_data,
            "availability": {"is_always_available": True},
            "start_date": "2024-05-01",
            "end_date": "2024-05-05",
        },
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["days"] == 5
    assert body["price_per_day"] == {"amount": 800, "currency": "EUR"}
    assert body["rental_subtotal"]["amount"] == 4000
    assert body["deposit"]["amount"] == 5000
    assert body["total"]["amount"] == 9000
    assert body["tier"]["days_from"] == 4


def test_create_quote_conflict(client, price_model_data):
    resp = client.post(
        "/api/v1/quotes",
        json={
            "price_model": price_model_data,
            "availability": FEBRUARY,
            "start_date": "2024-02-01",
            "end_date": "2024-02-08",
        },
    )

    assert resp.status_code == 409
    detail = resp.json()["detail"]
    assert detail["reason"] == "DateExplicitlyBlocked"
    assert detail["day"] == "2024-02-04"


def test_create_quote_inverted_range(client, price_model_data):
    resp = client.post(
        "/api/v1/quotes",
        json={
            "price_model": price_model_data,
            "availability": FEBRUARY,
            "start_date": "2024-02-08",
            "end_date": "2024-02-01",
        },
    )

    assert resp.status_code == 400
    assert resp.json()["detail"]["reason"] == "InvalidRange"


def test_create_quote_invalid_price_model(client, price_model_data):
    price_model_data["tiers"][0]["days_to"] = 0

    resp = client.post(
        "/api/v1/quotes",
        json={
            "price_model": price_model_data,
            "availability": {"is_always_available": True},
            "start_date": "2024-05-01",
            "end_date": "2024-05-05",
        },
    )

    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "InvalidPriceModel"


def test_check_availability_not_bookable_is_ok_response(client):
    resp = client.post(
        "/api/v1/availability/check",
        json={
            "availability": FEBRUARY,
            "start_date": "2024-02-05",
            "end_date": "2024-02-07",
        },
    )

    assert resp.status_code == 200
    assert resp.json() == {
        "bookable": False,
        "reason": "DateAlreadyRented",
        "day": "2024-02-06",
    }


def test_calendar(client):
    resp = client.post(
        "/api/v1/availability/calendar",
        json={
            "availability": FEBRUARY,
            "start_date": "2024-02-03",
            "end_date": "2024-02-07",
        },
    )

    assert resp.status_code == 200
    assert [d["status"] for d in resp.json()["days"]] == [
        "available",
        "unavailable",
        "available",
        "rented",
        "rented",
    ]


def test_calendar_inverted_window(client):
    resp = client.post(
        "/api/v1/availability/calendar",
        json={
            "availability": FEBRUARY,
            "start_date": "2024-02-07",
            "end_date": "2024-02-03",
        },
    )

    assert resp.status_code == 400


def test_response_bodies_use_day_field(client):
    resp = client.post(
        "/api/v1/availability/calendar",
        json={
            "availability": FEBRUARY,
            "start_date": "2024-02-05",
            "end_date": "2024-02-06",
        },
    )

    assert resp.status_code == 200
    assert resp.json()["days"][1] == {"day": "2024-02-06", "status": "rented"}
