"""
Risk Validation Engine Implementation

Sizes trades and validates them against the trader's risk settings.
PURE PYTHON - All rules are deterministic and auditable.
"""

import logging
from functools import lru_cache
from typing import Optional

from marketdesk.core.config import settings as app_settings
from marketdesk.schemas.risk import (
    ExposureSummary,
    PortfolioPosition,
    PositionSizeCalculation,
    RiskAppetite,
    RiskSettings,
    TradeEvaluation,
    ValidationResult,
)
from marketdesk.services.base import InvalidInputError
from marketdesk.services.risk.calculations import (
    calculate_position_size,
    calculate_risk_reward,
    default_target,
    summarize_exposure,
    validate_against_risk_settings,
)
from marketdesk.services.risk.interface import RiskServiceInterface, RiskValidationInput

logger = logging.getLogger(__name__)


class RiskValidationService(RiskServiceInterface):
    """
    Risk Validation Engine.

    Stateless: every method takes the trader's settings as a parameter,
    so one instance serves any number of concurrent requests.
    """

    @property
    def name(self) -> str:
        return "RiskValidationService"

    async def execute(self, input_data: RiskValidationInput) -> TradeEvaluation:
        """Evaluate a trade exactly as the risk page calculator does."""
        return self.evaluate_trade(
            entry_price=input_data.entry_price,
            stop_loss=input_data.stop_loss,
            settings=input_data.risk_settings,
            target_price=input_data.target_price,
        )

    def evaluate_trade(
        self,
        entry_price: float,
        stop_loss: float,
        settings: RiskSettings,
        target_price: Optional[float] = None,
    ) -> TradeEvaluation:
        """
        Size with the trader's per-trade risk %, score against the target
        and check the result against the trader's limits.
        """
        target_was_defaulted = target_price is None
        if target_was_defaulted:
            target_price = default_target(entry_price, app_settings.default_target_percent)

        try:
            position = self.calculate_position_size(
                settings.total_capital,
                settings.max_risk_per_trade_percentage,
                entry_price,
                stop_loss,
            )
            rr_ratio = self.calculate_risk_reward(entry_price, stop_loss, target_price)
        except InvalidInputError as e:
            logger.warning(f"Trade evaluation rejected input: {e.message}")
            raise

        validation = self.validate_trade(
            position.position_value, position.capital_at_risk, settings
        )

        if not validation.valid:
            logger.info(
                f"Trade @ {entry_price} fails risk limits: {'; '.join(validation.violations)}"
            )

        return TradeEvaluation(
            position=position,
            risk_reward_ratio=rr_ratio,
            target_price=target_price,
            target_was_defaulted=target_was_defaulted,
            validation=validation,
            max_daily_loss_amount=settings.max_daily_loss_amount,
        )

    def calculate_position_size(
        self,
        capital: float,
        risk_percentage: float,
        entry_price: float,
        stop_loss: float,
    ) -> PositionSizeCalculation:
        return calculate_position_size(capital, risk_percentage, entry_price, stop_loss)

    def calculate_risk_reward(self, entry: float, stop_loss: float, target: float) -> float:
        return calculate_risk_reward(entry, stop_loss, target)

    def validate_trade(
        self,
        position_value: float,
        capital_at_risk: float,
        settings: RiskSettings,
    ) -> ValidationResult:
        return validate_against_risk_settings(position_value, capital_at_risk, settings)

    def summarize_exposure(
        self,
        positions: list[PortfolioPosition],
        settings: RiskSettings,
    ) -> ExposureSummary:
        return summarize_exposure(positions, settings)


def default_risk_settings() -> RiskSettings:
    """Starting risk settings for a trader who has not configured any."""
    return RiskSettings(
        total_capital=app_settings.default_total_capital,
        max_position_size_percentage=app_settings.default_max_position_percent,
        max_risk_per_trade_percentage=app_settings.default_max_risk_per_trade_percent,
        max_daily_loss_percentage=app_settings.default_max_daily_loss_percent,
        volume_multiplier=app_settings.default_volume_multiplier,
        auto_stop_loss=app_settings.default_auto_stop_loss,
        risk_appetite=RiskAppetite.MODERATE,
    )


@lru_cache()
def get_risk_service() -> RiskValidationService:
    """Get the shared (stateless) risk service."""
    return RiskValidationService()
