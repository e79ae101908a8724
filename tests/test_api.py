"""Tests for the HTTP API."""

from unittest.mock import MagicMock

import pytest

from stock_manager.api.errors import handle_unexpected_error


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestStockCrud:
    """Tests for create / read / update / delete endpoints."""

    def test_create_and_get(self, client):
        response = client.post("/api/stocks", json={"symbol": "aapl", "quantity": 10})

        assert response.status_code == 201
        assert response.json() == {"symbol": "AAPL", "quantity": 10}

        response = client.get("/api/stocks/aapl")
        assert response.status_code == 200
        assert response.json() == {"symbol": "AAPL", "quantity": 10}

    def test_create_duplicate_conflicts(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 10})

        response = client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 1})

        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["error"] == "Conflict"
        assert "AAPL" in body["message"]
        assert "timestamp" in body

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"symbol": "AAPL", "quantity": 0}, "quantity"),
            ({"symbol": "", "quantity": 1}, "symbol"),
            ({"symbol": "TOOLONGSYMBOL", "quantity": 1}, "symbol"),
            ({"symbol": "BRK.B", "quantity": 1}, "symbol"),
        ],
    )
    def test_create_validation(self, client, payload, field):
        response = client.post("/api/stocks", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert field in body["errors"]

    def test_list(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 1})
        client.post("/api/stocks", json={"symbol": "MSFT", "quantity": 2})

        response = client.get("/api/stocks")

        assert response.status_code == 200
        assert {s["symbol"] for s in response.json()} == {"AAPL", "MSFT"}

    def test_get_missing(self, client):
        response = client.get("/api/stocks/NOPE")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert "NOPE" in body["message"]

    def test_update(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 1})

        response = client.put("/api/stocks/AAPL", json={"quantity": 25})

        assert response.status_code == 200
        assert response.json()["quantity"] == 25

    def test_update_rejects_zero(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 1})

        response = client.put("/api/stocks/AAPL", json={"quantity": 0})

        assert response.status_code == 400

    def test_update_missing(self, client):
        response = client.put("/api/stocks/NOPE", json={"quantity": 5})
        assert response.status_code == 404

    def test_delete(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 1})

        response = client.delete("/api/stocks/aapl")

        assert response.status_code == 204
        assert client.get("/api/stocks/AAPL").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/api/stocks/NOPE").status_code == 404


class TestTransactions:
    """Tests for buy / sell endpoints."""

    def test_buy_creates_then_accumulates(self, client):
        response = client.post("/api/stocks/buy", json={"symbol": "tsla", "quantity": 3})
        assert response.status_code == 200
        assert response.json() == {"symbol": "TSLA", "quantity": 3}

        response = client.post("/api/stocks/buy", json={"symbol": "TSLA", "quantity": 2})
        assert response.json()["quantity"] == 5

    def test_partial_sell(self, client):
        client.post("/api/stocks/buy", json={"symbol": "AAPL", "quantity": 10})

        response = client.post("/api/stocks/sell", json={"symbol": "AAPL", "quantity": 4})

        assert response.status_code == 200
        assert response.json()["quantity"] == 6

    def test_full_sell_returns_no_content(self, client):
        client.post("/api/stocks/buy", json={"symbol": "AAPL", "quantity": 10})

        response = client.post("/api/stocks/sell", json={"symbol": "AAPL", "quantity": 10})

        assert response.status_code == 204
        assert client.get("/api/stocks/AAPL").status_code == 404

    def test_sell_insufficient(self, client):
        client.post("/api/stocks/buy", json={"symbol": "AAPL", "quantity": 5})

        response = client.post("/api/stocks/sell", json={"symbol": "AAPL", "quantity": 8})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Bad Request"
        assert "available 5, requested 8" in body["message"]

    def test_sell_missing(self, client):
        response = client.post("/api/stocks/sell", json={"symbol": "NOPE", "quantity": 1})
        assert response.status_code == 404

    def test_buy_validation(self, client):
        response = client.post("/api/stocks/buy", json={"symbol": "AAPL", "quantity": -1})
        assert response.status_code == 400


class TestPortfolioFigures:
    """Tests for valuation endpoints."""

    @pytest.fixture
    def portfolio(self, client):
        client.post("/api/stocks", json={"symbol": "AAPL", "quantity": 10})  # 1500
        client.post("/api/stocks", json={"symbol": "GOOGL", "quantity": 5})  # 14000
        return client

    def test_total_value(self, portfolio):
        response = portfolio.get("/api/stocks/total-value")

        assert response.status_code == 200
        assert response.json() == pytest.approx(15500.0)

    def test_average_price(self, portfolio):
        response = portfolio.get("/api/stocks/average-price")
        assert response.json() == pytest.approx(15500.0 / 15)

    def test_summary(self, portfolio):
        body = portfolio.get("/api/stocks/summary").json()

        assert body["total_value"] == pytest.approx(15500.0)
        assert body["total_stocks"] == 2
        assert body["total_quantity"] == 15
        assert len(body["stock_details"]) == 2

    def test_highest_value(self, portfolio):
        body = portfolio.get("/api/stocks/highest-value").json()

        assert body["symbol"] == "GOOGL"
        assert body["current_price"] == 2800.0
        assert body["total_value"] == pytest.approx(14000.0)

    def test_sorted_by_value(self, portfolio):
        body = portfolio.get("/api/stocks/sorted-by-value").json()
        assert [s["symbol"] for s in body] == ["GOOGL", "AAPL"]

    def test_investment(self, portfolio):
        response = portfolio.get("/api/stocks/aapl/investment")
        assert response.json() == pytest.approx(1500.0)

    def test_investment_missing(self, client):
        assert client.get("/api/stocks/NOPE/investment").status_code == 404

    def test_empty_portfolio(self, client):
        assert client.get("/api/stocks/total-value").json() == 0.0
        assert client.get("/api/stocks/average-price").json() == 0.0
        assert client.get("/api/stocks/summary").json()["stock_details"] == []
        assert client.get("/api/stocks/sorted-by-value").json() == []
        assert client.get("/api/stocks/highest-value").status_code == 404

    def test_price_override_changes_ranking(self, portfolio):
        portfolio.put("/api/prices/AAPL", json={"price": 5000.0})

        body = portfolio.get("/api/stocks/sorted-by-value").json()

        assert [s["symbol"] for s in body] == ["AAPL", "GOOGL"]


class TestPrices:
    """Tests for price endpoints."""

    def test_get_price(self, client):
        response = client.get("/api/prices/aapl")
        assert response.json() == {"symbol": "AAPL", "price": 150.0}

    def test_set_price(self, client):
        response = client.put("/api/prices/msft", json={"price": 400.0})

        assert response.status_code == 200
        assert client.get("/api/prices/MSFT").json()["price"] == 400.0

    def test_set_price_rejects_non_positive(self, client):
        assert client.put("/api/prices/MSFT", json={"price": 0}).status_code == 400

    def test_list_prices(self, client):
        body = client.get("/api/prices").json()
        assert body["GOOGL"] == 2800.0


class TestErrorHandlers:
    def test_unexpected_error(self):
        """Unhandled exceptions become a generic 500 body."""
        request = MagicMock()
        request.method = "GET"
        request.url.path = "/api/stocks"

        response = handle_unexpected_error(request, RuntimeError("boom"))

        assert response.status_code == 500
        assert b"An unexpected error occurred" in response.body
        assert b"boom" not in response.body
