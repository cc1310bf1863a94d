"""
Market Analysis Calculations

Trap detection, Central Pivot Range and breadth-based market bias.
NO LLM INVOLVEMENT - All math is deterministic.
"""

import logging
import math
from typing import Optional

from marketdesk.schemas.market import (
    CPRResult,
    MarketBias,
    MarketBiasResult,
    TrapAssessment,
    TrapType,
    Trend,
)
from marketdesk.services.base import InvalidInputError

logger = logging.getLogger(__name__)

SERVICE_NAME = "MarketAnalysis"

# Trap thresholds (|price change| in %)
TRAP_MOVE_PERCENT = 3.0
EXTREME_MOVE_PERCENT = 5.0
EXTREME_LOW_VOLUME_RATIO = 0.5
TRAP_TYPE_VOLUME_RATIO = 1.5
INSTITUTIONAL_VOLUME_RATIO = 0.7
INSTITUTIONAL_MOVE_PERCENT = 4.0

# Breadth thresholds
BULLISH_ADVANCE_RATIO = 0.6
BEARISH_ADVANCE_RATIO = 0.4
BIAS_VOLUME_RATIO = 1.2
MAX_BIAS_STRENGTH = 95.0
NEUTRAL_STRENGTH = 50.0

NARROW_CPR_THRESHOLD = 0.01


def _require_finite(**values: float) -> None:
    for label, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(
                SERVICE_NAME, f"{label} must be a finite number, got {value}", {label: value}
            )


# =============================================================================
# TRAP DETECTION
# =============================================================================


def detect_institutional_trap(
    current_volume: float,
    avg_volume: float,
    price_change: float,
    volume_multiplier: float = 1.5,
) -> TrapAssessment:
    """
    Flag a price move that volume does not confirm.

    Tiers are checked strongest first; the first match wins:
        1. volume_ratio < 0.5 and |move| > 5%                 -> 90
        2. volume_ratio < volume_multiplier and |move| > 3%  -> 75
    """
    _require_finite(
        current_volume=current_volume,
        avg_volume=avg_volume,
        price_change=price_change,
        volume_multiplier=volume_multiplier,
    )

    if avg_volume <= 0:
        raise InvalidInputError(
            SERVICE_NAME,
            f"avg_volume must be positive, got {avg_volume}",
            {"avg_volume": avg_volume},
        )

    volume_ratio = current_volume / avg_volume

    if volume_ratio < EXTREME_LOW_VOLUME_RATIO and abs(price_change) > EXTREME_MOVE_PERCENT:
        return TrapAssessment(
            is_trap=True,
            confidence=90,
            reason=(
                f"Extreme price movement ({price_change:.2f}%) on abnormally low volume "
                f"({volume_ratio:.2f}x). High probability of manipulation."
            ),
        )

    if volume_ratio < volume_multiplier and abs(price_change) > TRAP_MOVE_PERCENT:
        return TrapAssessment(
            is_trap=True,
            confidence=75,
            reason=(
                f"Price moved {price_change:.2f}% on {volume_ratio:.2f}x average volume. "
                "Low volume spike indicates potential institutional trap."
            ),
        )

    return TrapAssessment(
        is_trap=False,
        confidence=0,
        reason="Volume confirms price action. No trap detected.",
    )


def assess_trap_type(
    price_change: float,
    volume_ratio: float,
    trend: Trend,
) -> Optional[TrapType]:
    """
    Classify a thin-volume move.

    Returns None when volume is healthy. The INSTITUTIONAL_TRAP check
    sits behind the volume_ratio < 1.5 branch and never fires with the
    current thresholds.
    """
    _require_finite(price_change=price_change, volume_ratio=volume_ratio)

    try:
        trend = Trend(trend)
    except ValueError:
        raise InvalidInputError(
            SERVICE_NAME,
            f"Unknown trend {trend!r}, expected one of {[t.value for t in Trend]}",
            {"trend": trend},
        )

    if volume_ratio < TRAP_TYPE_VOLUME_RATIO:
        if price_change > TRAP_MOVE_PERCENT and trend != Trend.UPTREND:
            return TrapType.BULL_TRAP
        if price_change < -TRAP_MOVE_PERCENT and trend != Trend.DOWNTREND:
            return TrapType.BEAR_TRAP
        return TrapType.VOLUME_TRAP

    if volume_ratio < INSTITUTIONAL_VOLUME_RATIO and abs(price_change) > INSTITUTIONAL_MOVE_PERCENT:
        return TrapType.INSTITUTIONAL_TRAP

    return None


# =============================================================================
# CENTRAL PIVOT RANGE
# =============================================================================


def calculate_cpr(
    high: float,
    low: float,
    close: float,
    narrow_threshold: float = NARROW_CPR_THRESHOLD,
) -> CPRResult:
    """
    Central Pivot Range from the prior session's high/low/close.

    A narrow range (width under 1% of close) tends to precede a
    trending day.
    """
    _require_finite(high=high, low=low, close=close)

    if close <= 0:
        raise InvalidInputError(SERVICE_NAME, f"close must be positive, got {close}", {"close": close})
    if high < low:
        raise InvalidInputError(
            SERVICE_NAME,
            f"high ({high}) is below low ({low})",
            {"high": high, "low": low},
        )

    pivot = (high + low + close) / 3
    bc = (high + low) / 2
    tc = pivot - bc + pivot
    cpr_range = tc - bc
    is_narrow = cpr_range / close < narrow_threshold

    logger.debug(f"CPR: pivot {pivot:.2f}, bc {bc:.2f}, tc {tc:.2f}, narrow={is_narrow}")

    return CPRResult(
        pivot=pivot,
        bc=bc,
        tc=tc,
        range=cpr_range,
        is_narrow=is_narrow,
    )


# =============================================================================
# MARKET BIAS
# =============================================================================


def assess_market_bias(
    advancing_stocks: int,
    declining_stocks: int,
    volume_ratio: float,
) -> MarketBiasResult:
    """Directional bias from advance/decline breadth, confirmed by volume."""
    _require_finite(volume_ratio=volume_ratio)

    if advancing_stocks < 0 or declining_stocks < 0:
        raise InvalidInputError(
            SERVICE_NAME,
            "Advancing and declining counts cannot be negative",
            {"advancing": advancing_stocks, "declining": declining_stocks},
        )

    total = advancing_stocks + declining_stocks
    if total == 0:
        raise InvalidInputError(
            SERVICE_NAME,
            "No advancing or declining stocks - breadth is undefined",
            {"advancing": advancing_stocks, "declining": declining_stocks},
        )

    advance_ratio = advancing_stocks / total

    if advance_ratio > BULLISH_ADVANCE_RATIO and volume_ratio > BIAS_VOLUME_RATIO:
        strength = min(MAX_BIAS_STRENGTH, 50 + (advance_ratio - BULLISH_ADVANCE_RATIO) * 100)
        return MarketBiasResult(bias=MarketBias.BULLISH, strength=strength)

    if advance_ratio < BEARISH_ADVANCE_RATIO and volume_ratio > BIAS_VOLUME_RATIO:
        strength = min(MAX_BIAS_STRENGTH, 50 + (BEARISH_ADVANCE_RATIO - advance_ratio) * 100)
        return MarketBiasResult(bias=MarketBias.BEARISH, strength=strength)

    return MarketBiasResult(bias=MarketBias.NEUTRAL, strength=NEUTRAL_STRENGTH)
