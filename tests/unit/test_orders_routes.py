"""Unit tests for the JSON order endpoints."""


def create(client, **attributes):
    return client.post("/orders", json=attributes)


class TestCreateOrder:
    def test_create_returns_masked_order(self, client):
        response = create(client, orderId="order-1", cardNumber="4111111111111234", amount="10,50")

        assert response.status_code == 201
        assert response.json() == {
            "orderId": "order-1",
            "cardNumber": "************1234",
            "amount": "10.50",
        }

    def test_duplicate_create_conflicts(self, client):
        create(client, orderId="order-1", amount="10,50")

        response = create(client, orderId="order-1", amount="99,00")

        assert response.status_code == 409
        assert client.get("/orders/order-1").json()["amount"] == "10.50"

    def test_create_without_order_id(self, client):
        response = create(client, amount="10,50")

        assert response.status_code == 422

    def test_numeric_card_number_is_rejected(self, client):
        response = create(client, orderId="order-1", cardNumber=4111111111111234)

        assert response.status_code == 422
        assert "cardNumber" in response.json()["detail"]
        assert client.get("/orders/order-1").status_code == 404

    def test_numeric_amount_is_rejected(self, client):
        response = create(client, orderId="order-2", amount=10.5)

        assert response.status_code == 422
        assert "amount" in response.json()["detail"]
        assert client.get("/orders").json() == {"count": 0}


class TestGetOrder:
    def test_get_existing(self, client):
        create(client, orderId="order-1", amount="1,00")

        response = client.get("/orders/order-1")

        assert response.status_code == 200
        assert response.json()["amount"] == "1.00"

    def test_get_missing(self, client):
        response = client.get("/orders/missing-id")

        assert response.status_code == 404


class TestCaptureOrder:
    def test_capture_sets_status(self, client):
        create(client, orderId="order-1")

        response = client.post("/orders/order-1/capture")

        assert response.status_code == 200
        assert response.json()["status"] == "captured"
        assert client.get("/orders/order-1").json()["status"] == "captured"

    def test_capture_missing(self, client):
        response = client.post("/orders/missing-id/capture")

        assert response.status_code == 404


class TestCountOrders:
    def test_count(self, client):
        create(client, orderId="order-1")
        create(client, orderId="order-2")
        create(client, orderId="order-1")
        client.post("/orders/order-1/capture")

        assert client.get("/orders").json() == {"count": 2}
