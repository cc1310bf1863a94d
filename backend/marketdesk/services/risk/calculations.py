"""
Risk Calculations

Position sizing, risk/reward, risk-limit validation and portfolio exposure.
PURE PYTHON - No state, no I/O. Same inputs always give the same output.
"""

import logging
import math

from marketdesk.schemas.risk import (
    ExposureSummary,
    PortfolioPosition,
    PositionSizeCalculation,
    RiskSettings,
    ValidationResult,
)
from marketdesk.services.base import InvalidInputError

logger = logging.getLogger(__name__)

SERVICE_NAME = "RiskEngine"


def _require_finite(**values: float) -> None:
    for label, value in values.items():
        if value is None or not math.isfinite(value):
            raise InvalidInputError(
                SERVICE_NAME, f"{label} must be a finite number, got {value}", {label: value}
            )


def _require_positive(**values: float) -> None:
    _require_finite(**values)
    for label, value in values.items():
        if value <= 0:
            raise InvalidInputError(
                SERVICE_NAME, f"{label} must be positive, got {value}", {label: value}
            )


# =============================================================================
# POSITION SIZING
# =============================================================================


def calculate_position_size(
    capital: float,
    risk_percentage: float,
    entry_price: float,
    stop_loss: float,
) -> PositionSizeCalculation:
    """
    Size a position so that hitting the stop loses at most the risk budget.

    capital_at_risk = capital * risk% / 100
    quantity        = floor(capital_at_risk / |entry - stop|)

    Raises:
        InvalidInputError: non-positive capital/prices, risk % outside
            (0, 100], or entry equal to stop.
    """
    _require_positive(capital=capital, entry_price=entry_price, stop_loss=stop_loss)

    if not 0 < risk_percentage <= 100:
        raise InvalidInputError(
            SERVICE_NAME,
            f"risk_percentage must be in (0, 100], got {risk_percentage}",
            {"risk_percentage": risk_percentage},
        )

    risk_per_share = abs(entry_price - stop_loss)
    if risk_per_share == 0:
        raise InvalidInputError(
            SERVICE_NAME,
            "Entry price and stop loss are equal - risk per share is zero",
            {"entry_price": entry_price, "stop_loss": stop_loss},
        )

    capital_at_risk = capital * (risk_percentage / 100)
    shares = capital_at_risk / risk_per_share
    if not math.isfinite(shares) or not math.isfinite(shares * entry_price):
        raise InvalidInputError(
            SERVICE_NAME,
            "Position size overflows - capital is too large for this stop distance",
            {"capital": capital, "risk_per_share": risk_per_share},
        )

    quantity = math.floor(shares)
    position_value = quantity * entry_price

    logger.debug(
        f"Position size: {quantity} @ {entry_price} (risk/share {risk_per_share:.2f}, "
        f"budget {capital_at_risk:.2f})"
    )

    return PositionSizeCalculation(
        capital=capital,
        risk_percentage=risk_percentage,
        entry_price=entry_price,
        stop_loss=stop_loss,
        recommended_quantity=quantity,
        capital_at_risk=capital_at_risk,
        position_value=position_value,
    )


# =============================================================================
# RISK / REWARD
# =============================================================================


def calculate_risk_reward(entry: float, stop_loss: float, target: float) -> float:
    """Reward:risk ratio, |target - entry| / |entry - stop|."""
    _require_finite(entry=entry, stop_loss=stop_loss, target=target)

    risk = abs(entry - stop_loss)
    if risk == 0:
        raise InvalidInputError(
            SERVICE_NAME,
            "Entry price and stop loss are equal - risk is zero",
            {"entry": entry, "stop_loss": stop_loss},
        )

    reward = abs(target - entry)
    return reward / risk


def default_target(entry: float, target_percent: float = 5.0) -> float:
    """Target used when the trader leaves it blank."""
    return entry * (1 + target_percent / 100)


# =============================================================================
# RISK LIMIT VALIDATION
# =============================================================================


def validate_against_risk_settings(
    position_value: float,
    capital_at_risk: float,
    settings: RiskSettings,
) -> ValidationResult:
    """
    Check a proposed position against the trader's limits.

    Rules (in order):
        1. Position value <= total_capital x max_position_size %
        2. Capital at risk <= total_capital x max_risk_per_trade %

    Breaches are returned as violations, never raised. Non-finite
    amounts are invalid input, not breaches.
    """
    _require_finite(position_value=position_value, capital_at_risk=capital_at_risk)

    violations: list[str] = []

    if position_value > settings.max_position_value:
        violations.append(
            f"Position size exceeds {settings.max_position_size_percentage:g}% limit"
        )

    if capital_at_risk > settings.max_risk_amount:
        violations.append(
            f"Risk per trade exceeds {settings.max_risk_per_trade_percentage:g}% limit"
        )

    return ValidationResult(valid=not violations, violations=violations)


# =============================================================================
# PORTFOLIO EXPOSURE
# =============================================================================


def summarize_exposure(
    positions: list[PortfolioPosition],
    settings: RiskSettings,
) -> ExposureSummary:
    """
    Exposure and P&L across open positions.

    Each position counts at current_value, or invested_amount when no
    current value is known (or it is zero). Missing P&L counts as 0.
    The daily-loss headroom shrinks only when total P&L is negative.
    """
    total_exposure = sum(p.current_value or p.invested_amount for p in positions)
    total_pnl = sum(p.pnl or 0.0 for p in positions)
    _require_finite(total_exposure=total_exposure, total_pnl=total_pnl)

    exposure_percentage = total_exposure / settings.total_capital * 100
    max_daily_loss = settings.max_daily_loss_amount
    headroom = max(0.0, max_daily_loss + min(total_pnl, 0.0))

    logger.debug(
        f"Exposure: {total_exposure:.2f} across {len(positions)} positions "
        f"({exposure_percentage:.1f}% of capital), P&L {total_pnl:.2f}"
    )

    return ExposureSummary(
        position_count=len(positions),
        total_exposure=total_exposure,
        total_pnl=total_pnl,
        exposure_percentage=exposure_percentage,
        max_daily_loss_amount=max_daily_loss,
        daily_loss_headroom=headroom,
    )
