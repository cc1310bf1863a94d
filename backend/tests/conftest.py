"""
Pytest configuration and shared fixtures for the MarketDesk engine.

Provides:
- Risk settings (default and tight limits)
- Sample agent decisions
- FastAPI test client
"""

import pytest
from fastapi.testclient import TestClient

from marketdesk.main import app
from marketdesk.schemas.decision import AgentDecision, DecisionType
from marketdesk.schemas.risk import RiskAppetite, RiskSettings


@pytest.fixture
def risk_settings() -> RiskSettings:
    """Default settings from the risk page: 1L capital, 10% position, 2% risk."""
    return RiskSettings(
        total_capital=100000,
        max_position_size_percentage=10,
        max_risk_per_trade_percentage=2,
        max_daily_loss_percentage=5,
        volume_multiplier=1.5,
        auto_stop_loss=True,
        risk_appetite=RiskAppetite.MODERATE,
    )


@pytest.fixture
def generous_settings() -> RiskSettings:
    """Limits wide enough that a normal trade passes."""
    return RiskSettings(
        total_capital=100000,
        max_position_size_percentage=50,
        max_risk_per_trade_percentage=2,
        max_daily_loss_percentage=5,
    )


def make_decision(decision_id, confidence=None, ratio=None, symbol="RELIANCE"):
    return AgentDecision(
        id=decision_id,
        stock_symbol=symbol,
        decision_type=DecisionType.BUY,
        confidence_score=confidence,
        risk_reward_ratio=ratio,
    )


@pytest.fixture
def sample_decisions() -> list[AgentDecision]:
    """Scores: a=140, b=0, c=160, d=140."""
    return [
        make_decision("a", confidence=70, ratio=2.0, symbol="TCS"),
        make_decision("b", confidence=None, ratio=3.0, symbol="INFY"),
        make_decision("c", confidence=80, ratio=2.0, symbol="HDFCBANK"),
        make_decision("d", confidence=70, ratio=2.0, symbol="SBIN"),
    ]


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
