"""
CONTRACT 2: Market Analysis

Input: Volume, price change, OHLC and breadth figures
Output: TrapAssessment, TrapType, CPRResult, MarketBiasResult

All figures are supplied by the caller. Nothing here fetches prices.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Trend(str, Enum):
    UPTREND = "UPTREND"
    DOWNTREND = "DOWNTREND"
    SIDEWAYS = "SIDEWAYS"


class TrapType(str, Enum):
    BULL_TRAP = "BULL_TRAP"  # Up move on thin volume against the trend
    BEAR_TRAP = "BEAR_TRAP"  # Down move on thin volume against the trend
    VOLUME_TRAP = "VOLUME_TRAP"  # Thin volume, no directional conflict
    INSTITUTIONAL_TRAP = "INSTITUTIONAL_TRAP"


class MarketBias(str, Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


# =============================================================================
# OUTPUT: Trap Detection
# =============================================================================


class TrapAssessment(BaseModel):
    """Whether a price move is unconfirmed by volume."""

    is_trap: bool
    confidence: float = Field(..., ge=0, le=100)
    reason: str

    class Config:
        frozen = True


# =============================================================================
# OUTPUT: Central Pivot Range
# =============================================================================


class CPRResult(BaseModel):
    """
    Central Pivot Range from the prior session.

    pivot = (high + low + close) / 3
    bc    = (high + low) / 2
    tc    = 2 * pivot - bc
    """

    pivot: float
    bc: float = Field(..., description="Bottom central")
    tc: float = Field(..., description="Top central")
    range: float = Field(..., description="tc - bc, negative when close < pivot")
    is_narrow: bool = Field(..., description="Range under 1% of close")

    class Config:
        frozen = True


# =============================================================================
# OUTPUT: Market Bias
# =============================================================================


class MarketBiasResult(BaseModel):
    """Directional lean from breadth and volume."""

    bias: MarketBias
    strength: float = Field(..., ge=0, le=100)

    class Config:
        frozen = True


# =============================================================================
# COMBINED: Market Context
# =============================================================================


class MarketContext(BaseModel):
    """
    Everything the engine can say about one instrument's session.
    Sections are None when their inputs were not supplied.
    """

    symbol: Optional[str] = None
    trap: Optional[TrapAssessment] = None
    trap_type: Optional[TrapType] = None
    cpr: Optional[CPRResult] = None
    bias: Optional[MarketBiasResult] = None

    class Config:
        frozen = True
