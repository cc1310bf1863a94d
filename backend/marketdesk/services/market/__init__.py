"""
Market Analysis Engine

CONTRACT:
    Input:  Volume, price change, prior-session OHLC, breadth
    Output: TrapAssessment, TrapType, CPRResult, MarketBiasResult

Figures are supplied by the caller. Nothing here fetches live prices.
"""

from marketdesk.services.market.calculations import (
    assess_market_bias,
    assess_trap_type,
    calculate_cpr,
    detect_institutional_trap,
)
from marketdesk.services.market.service import (
    MarketAnalysisService,
    MarketContextInput,
    get_market_service,
)

__all__ = [
    "assess_market_bias",
    "assess_trap_type",
    "calculate_cpr",
    "detect_institutional_trap",
    "MarketAnalysisService",
    "MarketContextInput",
    "get_market_service",
]
