"""Tests for the HTTP API"""

import pytest

from marketdesk.core.config import settings


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"

    def test_cors_allows_frontend_url(self, client):
        origin = settings.frontend_url
        response = client.get("/health", headers={"Origin": origin})

        assert response.headers["access-control-allow-origin"] == origin


class TestRiskEndpoints:
    """Test /api/v1/risk"""

    def test_defaults(self, client):
        body = client.get("/api/v1/risk/defaults").json()

        assert body["total_capital"] == 100000
        assert body["max_risk_per_trade_percentage"] == 2
        assert body["risk_appetite"] == "MODERATE"

    def test_position_size(self, client):
        response = client.post(
            "/api/v1/risk/position-size",
            json={"capital": 100000, "risk_percentage": 2, "entry_price": 100, "stop_loss": 95},
        )

        assert response.status_code == 200
        assert response.json()["recommended_quantity"] == 400

    def test_position_size_equal_prices(self, client):
        response = client.post(
            "/api/v1/risk/position-size",
            json={"capital": 100000, "risk_percentage": 2, "entry_price": 100, "stop_loss": 100},
        )

        assert response.status_code == 400
        assert "zero" in response.json()["detail"]

    def test_risk_reward(self, client):
        response = client.post(
            "/api/v1/risk/risk-reward",
            json={"entry_price": 100, "stop_loss": 90, "target_price": 120},
        )

        assert response.json() == {"risk_reward_ratio": 2.0}

    def test_validate_reports_violations(self, client):
        response = client.post(
            "/api/v1/risk/validate",
            json={
                "position_value": 50000,
                "capital_at_risk": 5000,
                "risk_settings": {"total_capital": 100000},
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "violations": [
                "Position size exceeds 10% limit",
                "Risk per trade exceeds 2% limit",
            ],
        }

    def test_validate_rejects_bad_settings(self, client):
        response = client.post(
            "/api/v1/risk/validate",
            json={
                "position_value": 1,
                "capital_at_risk": 1,
                "risk_settings": {"total_capital": 100000, "max_position_size_percentage": 250},
            },
        )

        assert response.status_code == 422

    def test_evaluate_with_defaults(self, client):
        response = client.post("/api/v1/risk/evaluate", json={"entry_price": 100, "stop_loss": 95})
        body = response.json()

        assert response.status_code == 200
        assert body["position"]["recommended_quantity"] == 400
        assert body["target_was_defaulted"] is True
        assert body["target_price"] == pytest.approx(105)
        assert body["validation"]["valid"] is False

    def test_position_size_overflow_is_bad_request(self, client):
        response = client.post(
            "/api/v1/risk/position-size",
            json={"capital": 1e308, "risk_percentage": 100, "entry_price": 1, "stop_loss": 0.5},
        )

        assert response.status_code == 400
        assert "overflows" in response.json()["detail"]

    def test_exposure(self, client):
        response = client.post(
            "/api/v1/risk/exposure",
            json={
                "positions": [
                    {
                        "stock_symbol": "RELIANCE",
                        "quantity": 20,
                        "avg_buy_price": 2500,
                        "invested_amount": 50000,
                        "current_value": 55000,
                        "pnl": 5000,
                    },
                    {
                        "stock_symbol": "SBIN",
                        "quantity": 40,
                        "avg_buy_price": 500,
                        "invested_amount": 20000,
                        "pnl": -8000,
                    },
                ],
            },
        )
        body = response.json()

        assert response.status_code == 200
        assert body["position_count"] == 2
        assert body["total_exposure"] == pytest.approx(75000)
        assert body["total_pnl"] == pytest.approx(-3000)
        assert body["exposure_percentage"] == pytest.approx(75)
        assert body["daily_loss_headroom"] == pytest.approx(2000)

    def test_exposure_uses_supplied_settings(self, client):
        response = client.post(
            "/api/v1/risk/exposure",
            json={
                "positions": [
                    {"stock_symbol": "TCS", "quantity": 10, "avg_buy_price": 3000, "invested_amount": 30000}
                ],
                "risk_settings": {"total_capital": 300000},
            },
        )

        assert response.json()["exposure_percentage"] == pytest.approx(10)

    def test_exposure_rejects_negative_quantity(self, client):
        response = client.post(
            "/api/v1/risk/exposure",
            json={
                "positions": [
                    {"stock_symbol": "TCS", "quantity": -1, "avg_buy_price": 3000, "invested_amount": 30000}
                ],
            },
        )

        assert response.status_code == 422


class TestMarketEndpoints:
    """Test /api/v1/market"""

    def test_trap(self, client):
        response = client.post(
            "/api/v1/market/trap",
            json={"current_volume": 30000, "avg_volume": 100000, "price_change": 6.0},
        )

        assert response.json()["confidence"] == 90

    def test_trap_zero_average(self, client):
        response = client.post(
            "/api/v1/market/trap",
            json={"current_volume": 30000, "avg_volume": 0, "price_change": 6.0},
        )

        assert response.status_code == 400

    def test_trap_type(self, client):
        response = client.post(
            "/api/v1/market/trap-type",
            json={"price_change": -4.0, "volume_ratio": 1.0, "trend": "UPTREND"},
        )

        assert response.json() == {"trap_type": "BEAR_TRAP"}

    def test_trap_type_none(self, client):
        response = client.post(
            "/api/v1/market/trap-type",
            json={"price_change": 4.0, "volume_ratio": 2.0},
        )

        assert response.json() == {"trap_type": None}

    def test_context_overflowing_volume_ratio(self, client):
        """1e308 / 1e-308 overflows the context volume ratio"""
        response = client.post(
            "/api/v1/market/context",
            json={"current_volume": 1e308, "avg_volume": 1e-308, "price_change": 4.0},
        )

        assert response.status_code == 400

    def test_cpr(self, client):
        body = client.post("/api/v1/market/cpr", json={"high": 110, "low": 90, "close": 100}).json()

        assert body["pivot"] == pytest.approx(100)
        assert body["is_narrow"] is True

    def test_bias(self, client):
        body = client.post(
            "/api/v1/market/bias",
            json={"advancing_stocks": 700, "declining_stocks": 300, "volume_ratio": 1.5},
        ).json()

        assert body["bias"] == "BULLISH"
        assert body["strength"] == pytest.approx(60)

    def test_bias_no_breadth(self, client):
        response = client.post(
            "/api/v1/market/bias",
            json={"advancing_stocks": 0, "declining_stocks": 0, "volume_ratio": 1.5},
        )

        assert response.status_code == 400

    def test_context_with_settings(self, client):
        response = client.post(
            "/api/v1/market/context",
            json={
                "symbol": "INFY",
                "current_volume": 180000,
                "avg_volume": 100000,
                "price_change": 4.0,
                "trend": "UPTREND",
                "risk_settings": {"volume_multiplier": 2.0},
            },
        )
        body = response.json()

        assert response.status_code == 200
        assert body["trap"]["is_trap"] is True
        assert body["trap_type"] is None
        assert body["cpr"] is None


class TestDecisionEndpoints:
    """Test /api/v1/decisions"""

    def test_rank(self, client):
        decisions = [
            {"id": "a", "stock_symbol": "TCS", "decision_type": "BUY", "confidence_score": 60},
            {"id": "b", "stock_symbol": "INFY", "decision_type": "SELL", "confidence_score": 50,
             "risk_reward_ratio": 3},
            {"id": "c", "stock_symbol": "SBIN", "decision_type": "HOLD", "confidence_score": 60},
        ]

        response = client.post("/api/v1/decisions/rank", json={"decisions": decisions})

        assert [d["id"] for d in response.json()] == ["b", "a", "c"]
        assert all(d["status"] == "PENDING" for d in response.json())

    def test_reasoning(self, client):
        response = client.post(
            "/api/v1/decisions/reasoning",
            json={
                "technicals": {"volume_confirmation": True},
                "risk_reward_ratio": 3,
            },
        )

        assert response.json() == {
            "reasoning": "Strong volume confirmation validates the move. "
            "Favorable risk-reward ratio of 3.00:1."
        }
