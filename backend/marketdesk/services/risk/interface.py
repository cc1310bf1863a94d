"""
Risk Validation Service Interface

Defines the contract for the risk calculator.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional

from marketdesk.services.base import BaseService
from marketdesk.schemas.risk import (
    ExposureSummary,
    PortfolioPosition,
    PositionSizeCalculation,
    RiskSettings,
    TradeEvaluation,
    ValidationResult,
)


@dataclass
class RiskValidationInput:
    """Input for a full trade evaluation."""

    entry_price: float
    stop_loss: float
    risk_settings: RiskSettings
    target_price: Optional[float] = None


class RiskServiceInterface(BaseService[RiskValidationInput, TradeEvaluation]):
    """
    Risk Validation Service Contract.

    INPUT: RiskValidationInput
        - entry_price / stop_loss: Proposed trade
        - target_price: Optional, defaults to entry + 5%
        - risk_settings: Trader's capital and limits

    OUTPUT: TradeEvaluation
        - position: Recommended quantity, capital at risk, position value
        - risk_reward_ratio: Reward per unit of risk
        - validation: Pass/fail plus itemized violations

    VALIDATION RULES (in order):
        1. Max position size check
        2. Max risk per trade check

    Violations are reported, not raised.
    """

    @property
    def name(self) -> str:
        return "RiskService"

    @abstractmethod
    async def execute(self, input_data: RiskValidationInput) -> TradeEvaluation:
        """Size, score and validate a proposed trade."""
        pass

    @abstractmethod
    def calculate_position_size(
        self,
        capital: float,
        risk_percentage: float,
        entry_price: float,
        stop_loss: float,
    ) -> PositionSizeCalculation:
        """Calculate position size for a risk budget."""
        pass

    @abstractmethod
    def calculate_risk_reward(self, entry: float, stop_loss: float, target: float) -> float:
        """Calculate reward:risk ratio."""
        pass

    @abstractmethod
    def validate_trade(
        self,
        position_value: float,
        capital_at_risk: float,
        settings: RiskSettings,
    ) -> ValidationResult:
        """Check a position against risk limits."""
        pass

    @abstractmethod
    def summarize_exposure(
        self,
        positions: list[PortfolioPosition],
        settings: RiskSettings,
    ) -> ExposureSummary:
        """Total exposure and P&L across open positions."""
        pass
