"""Unit tests for the test-control endpoints."""

from fake_braspag.domain import CreditCard

AUTHORIZE_URL = "/webservices/pagador/Pagador.asmx/Authorize"
CAPTURE_URL = "/webservices/pagador/Pagador.asmx/Capture"


def authorize(client, card_number: str, order_id: str):
    client.post(AUTHORIZE_URL, data={"orderId": order_id, "cardNumber": card_number, "amount": "5,00"})


def test_list_authorized_requests_hides_card_number(client):
    authorize(client, CreditCard.CAPTURE_OK, "order-1")

    body = client.get("/test/authorized-requests").json()

    assert body == {
        "authorized_requests": [
            {"order_id": "order-1", "card_last_four": "1678", "amount": "5,00"},
        ]
    }


def test_clear_authorized_requests(client):
    authorize(client, CreditCard.CAPTURE_OK, "order-1")

    response = client.delete("/test/authorized-requests")

    assert response.status_code == 204
    assert client.get("/test/authorized-requests").json()["authorized_requests"] == []
    # Capture is indeterminate once the authorization is forgotten
    assert "<status />" in client.post(CAPTURE_URL, data={"orderId": "order-1"}).text


def test_clear_captured_requests(client):
    authorize(client, CreditCard.CAPTURE_OK, "order-1")
    client.post(CAPTURE_URL, data={"orderId": "order-1"})

    response = client.delete("/test/captured-requests")

    assert response.status_code == 204
    assert client.get("/test/captured-requests").json()["captured_requests"] == []


def test_clear_orders(client):
    client.post("/orders", json={"orderId": "order-1"})
    client.post("/orders", json={"orderId": "order-2"})

    response = client.delete("/test/orders")

    assert response.status_code == 204
    assert client.get("/orders").json() == {"count": 0}


def test_apps_do_not_share_ledgers(test_settings):
    from fastapi.testclient import TestClient

    from fake_braspag.api.main import create_app

    with TestClient(create_app(test_settings)) as first, TestClient(create_app(test_settings)) as second:
        authorize(first, CreditCard.CAPTURE_OK, "order-1")

        assert second.get("/test/authorized-requests").json()["authorized_requests"] == []
