"""
CONTRACT 1: Risk Engine

Input: Trade prices + RiskSettings
Output: PositionSizeCalculation, ValidationResult, TradeEvaluation

This module performs DETERMINISTIC risk calculations.
All percentages are expressed as 0-100, never 0-1.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class RiskAppetite(str, Enum):
    CONSERVATIVE = "CONSERVATIVE"
    MODERATE = "MODERATE"
    AGGRESSIVE = "AGGRESSIVE"


# =============================================================================
# INPUT: Risk Configuration
# =============================================================================


class RiskSettings(BaseModel):
    """
    Trader's risk management settings.
    Supplied by the persistence layer on every request.
    """

    total_capital: float = Field(default=100000.0, gt=0, description="Trading capital in INR")
    max_position_size_percentage: float = Field(
        default=10.0,
        ge=0,
        le=100,
        description="Max % of capital in a single position",
    )
    max_risk_per_trade_percentage: float = Field(
        default=2.0,
        ge=0,
        le=100,
        description="Max % of capital lost if stop loss is hit",
    )
    max_daily_loss_percentage: float = Field(
        default=5.0,
        ge=0,
        le=100,
        description="Max daily loss as % of capital",
    )
    volume_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="Volume ratio below which a large move is suspect",
    )
    auto_stop_loss: bool = True
    risk_appetite: RiskAppetite = RiskAppetite.MODERATE

    class Config:
        frozen = True

    @property
    def max_position_value(self) -> float:
        return self.total_capital * (self.max_position_size_percentage / 100)

    @property
    def max_risk_amount(self) -> float:
        return self.total_capital * (self.max_risk_per_trade_percentage / 100)

    @property
    def max_daily_loss_amount(self) -> float:
        return self.total_capital * (self.max_daily_loss_percentage / 100)


# =============================================================================
# OUTPUT: Position Sizing
# =============================================================================


class PositionSizeCalculation(BaseModel):
    """
    Recommended position for a trade.

    capital_at_risk is the risk budget (capital x risk %).
    recommended_quantity is floored, so the actual loss at the
    stop never exceeds the budget.
    """

    capital: float
    risk_percentage: float
    entry_price: float
    stop_loss: float
    recommended_quantity: int = Field(..., ge=0, description="Number of shares")
    capital_at_risk: float = Field(..., ge=0)
    position_value: float = Field(..., ge=0)

    class Config:
        frozen = True


class ValidationResult(BaseModel):
    """Pass/fail against risk limits. Violations are results, not errors."""

    valid: bool
    violations: list[str] = Field(default_factory=list)

    class Config:
        frozen = True


class TradeEvaluation(BaseModel):
    """
    Complete calculator result for one trade.
    Returned by: Risk Validation Service
    Consumed by: Frontend risk page
    """

    position: PositionSizeCalculation
    risk_reward_ratio: float = Field(..., ge=0)
    target_price: float
    target_was_defaulted: bool = False
    validation: ValidationResult
    max_daily_loss_amount: Optional[float] = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "position": {
                    "capital": 100000,
                    "risk_percentage": 2,
                    "entry_price": 100,
                    "stop_loss": 95,
                    "recommended_quantity": 400,
                    "capital_at_risk": 2000,
                    "position_value": 40000,
                },
                "risk_reward_ratio": 1.0,
                "target_price": 105,
                "target_was_defaulted": True,
                "validation": {
                    "valid": False,
                    "violations": ["Position size exceeds 10% limit"],
                },
                "max_daily_loss_amount": 5000,
            }
        }


# =============================================================================
# PORTFOLIO EXPOSURE
# =============================================================================


class PortfolioPosition(BaseModel):
    """
    An open holding, as supplied by the caller.
    Market value falls back to the invested amount when no live value is known.
    """

    stock_symbol: str
    quantity: int = Field(..., ge=0)
    avg_buy_price: float = Field(..., ge=0, allow_inf_nan=False)
    invested_amount: float = Field(..., ge=0, allow_inf_nan=False)
    current_price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    current_value: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    pnl: Optional[float] = Field(default=None, allow_inf_nan=False)
    stop_loss: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    target_price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    class Config:
        frozen = True


class ExposureSummary(BaseModel):
    """
    Portfolio summary shown beside the calculator.
    daily_loss_headroom treats total_pnl as the session's P&L.
    """

    position_count: int = Field(..., ge=0)
    total_exposure: float = Field(..., ge=0)
    total_pnl: float
    exposure_percentage: float = Field(..., ge=0, description="Exposure as % of capital")
    max_daily_loss_amount: float = Field(..., ge=0)
    daily_loss_headroom: float = Field(..., ge=0)

    class Config:
        frozen = True
