"""Tests for the service layer (trade evaluation, market context, ranking)"""

import asyncio

import pytest

from marketdesk.schemas.market import MarketBias, TrapType, Trend
from marketdesk.schemas.risk import PortfolioPosition, RiskAppetite, RiskSettings
from marketdesk.services.base import InvalidInputError
from marketdesk.services.decision import DecisionBatch, get_decision_service
from marketdesk.services.market import MarketContextInput, get_market_service
from marketdesk.services.risk import (
    RiskValidationInput,
    RiskValidationService,
    default_risk_settings,
    get_risk_service,
)


class TestRiskValidationService:
    """Test RiskValidationService"""

    def test_shared_instance(self):
        assert get_risk_service() is get_risk_service()
        assert isinstance(get_risk_service(), RiskValidationService)

    def test_service_holds_no_state(self):
        assert vars(get_risk_service()) == {}

    def test_evaluate_with_target(self, generous_settings):
        evaluation = get_risk_service().evaluate_trade(100, 95, generous_settings, target_price=115)

        assert evaluation.position.recommended_quantity == 400
        assert evaluation.position.capital_at_risk == pytest.approx(2000)
        assert evaluation.risk_reward_ratio == pytest.approx(3.0)
        assert evaluation.target_price == 115
        assert evaluation.target_was_defaulted is False
        assert evaluation.validation.valid is True
        assert evaluation.max_daily_loss_amount == pytest.approx(5000)

    def test_evaluate_defaults_target(self, risk_settings):
        """Blank target -> entry + 5%; 5 point stop -> 1:1"""
        evaluation = get_risk_service().evaluate_trade(100, 95, risk_settings)

        assert evaluation.target_price == pytest.approx(105)
        assert evaluation.target_was_defaulted is True
        assert evaluation.risk_reward_ratio == pytest.approx(1.0)

    def test_evaluate_flags_oversized_position(self, risk_settings):
        """400 shares @ 100 = 40000 > 10% of 1L"""
        evaluation = get_risk_service().evaluate_trade(100, 95, risk_settings, target_price=110)

        assert evaluation.validation.valid is False
        assert evaluation.validation.violations == ["Position size exceeds 10% limit"]

    def test_evaluate_rejects_equal_entry_and_stop(self, risk_settings):
        with pytest.raises(InvalidInputError):
            get_risk_service().evaluate_trade(100, 100, risk_settings)

    def test_execute(self, generous_settings):
        input_data = RiskValidationInput(
            entry_price=2450,
            stop_loss=2400,
            risk_settings=generous_settings,
            target_price=2600,
        )

        evaluation = asyncio.run(get_risk_service().execute(input_data))

        assert evaluation.position.recommended_quantity == 40
        assert evaluation.position.position_value == pytest.approx(98000)
        assert evaluation.risk_reward_ratio == pytest.approx(3.0)
        assert evaluation.validation.valid is False  # 98000 > 50% of 1L

    def test_summarize_exposure(self, risk_settings):
        positions = [
            PortfolioPosition(
                stock_symbol="HDFCBANK",
                quantity=10,
                avg_buy_price=1600,
                invested_amount=16000,
                current_value=17000,
                pnl=1000,
            )
        ]

        summary = get_risk_service().summarize_exposure(positions, risk_settings)

        assert summary.total_exposure == pytest.approx(17000)
        assert summary.exposure_percentage == pytest.approx(17)

    def test_health_check(self):
        assert asyncio.run(get_risk_service().health_check()) is True

    def test_default_risk_settings(self):
        settings = default_risk_settings()

        assert settings == RiskSettings(
            total_capital=100000,
            max_position_size_percentage=10,
            max_risk_per_trade_percentage=2,
            max_daily_loss_percentage=5,
            volume_multiplier=1.5,
            auto_stop_loss=True,
            risk_appetite=RiskAppetite.MODERATE,
        )


class TestMarketAnalysisService:
    """Test MarketAnalysisService"""

    def test_full_context(self):
        input_data = MarketContextInput(
            symbol="RELIANCE",
            current_volume=100000,
            avg_volume=100000,
            price_change=4.0,
            trend=Trend.SIDEWAYS,
            high=110,
            low=90,
            close=100,
            advancing_stocks=700,
            declining_stocks=300,
            breadth_volume_ratio=1.5,
        )

        context = asyncio.run(get_market_service().execute(input_data))

        assert context.symbol == "RELIANCE"
        assert context.trap.is_trap is True
        assert context.trap.confidence == 75
        assert context.trap_type == TrapType.BULL_TRAP
        assert context.cpr.is_narrow is True
        assert context.bias.bias == MarketBias.BULLISH

    def test_partial_context(self):
        context = asyncio.run(
            get_market_service().execute(MarketContextInput(high=200, low=100, close=180))
        )

        assert context.trap is None
        assert context.trap_type is None
        assert context.bias is None
        assert context.cpr.range == pytest.approx(20)

    def test_uses_trader_volume_multiplier(self):
        """1.8x volume is a trap only for a trader with multiplier 2.0"""
        base = dict(current_volume=180000, avg_volume=100000, price_change=4.0)

        default_context = asyncio.run(get_market_service().execute(MarketContextInput(**base)))
        strict_context = asyncio.run(
            get_market_service().execute(
                MarketContextInput(**base, risk_settings=RiskSettings(volume_multiplier=2.0))
            )
        )

        assert default_context.trap.is_trap is False
        assert strict_context.trap.is_trap is True

    def test_invalid_breadth_propagates(self):
        with pytest.raises(InvalidInputError):
            asyncio.run(
                get_market_service().execute(
                    MarketContextInput(advancing_stocks=0, declining_stocks=0, breadth_volume_ratio=1.5)
                )
            )


class TestDecisionService:
    """Test DecisionService"""

    def test_execute_ranks(self, sample_decisions):
        ranked = asyncio.run(get_decision_service().execute(DecisionBatch(decisions=sample_decisions)))

        assert [d.id for d in ranked] == ["c", "a", "d", "b"]

    def test_execute_empty(self):
        assert asyncio.run(get_decision_service().execute(DecisionBatch())) == []
