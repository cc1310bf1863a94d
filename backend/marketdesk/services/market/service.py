"""
Market Analysis Service Implementation

Combines trap detection, CPR and market bias for one instrument.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from marketdesk.core.config import settings as app_settings
from marketdesk.schemas.market import (
    CPRResult,
    MarketBiasResult,
    MarketContext,
    TrapAssessment,
    TrapType,
    Trend,
)
from marketdesk.schemas.risk import RiskSettings
from marketdesk.services.base import BaseService
from marketdesk.services.market.calculations import (
    assess_market_bias,
    assess_trap_type,
    calculate_cpr,
    detect_institutional_trap,
)

logger = logging.getLogger(__name__)


@dataclass
class MarketContextInput:
    """
    Raw session figures for one instrument.
    Any group left as None is skipped.
    """

    symbol: Optional[str] = None

    # Volume / price action
    current_volume: Optional[float] = None
    avg_volume: Optional[float] = None
    price_change: Optional[float] = None
    trend: Trend = Trend.SIDEWAYS

    # Prior session OHLC
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None

    # Breadth
    advancing_stocks: Optional[int] = None
    declining_stocks: Optional[int] = None
    breadth_volume_ratio: Optional[float] = None

    risk_settings: Optional[RiskSettings] = None


class MarketAnalysisService(BaseService[MarketContextInput, MarketContext]):
    """
    Market Analysis Engine.

    No instance state. The trap volume multiplier comes from the
    trader's RiskSettings when supplied.
    """

    @property
    def name(self) -> str:
        return "MarketAnalysisService"

    async def execute(self, input_data: MarketContextInput) -> MarketContext:
        trap: Optional[TrapAssessment] = None
        trap_type: Optional[TrapType] = None
        cpr: Optional[CPRResult] = None
        bias: Optional[MarketBiasResult] = None

        if None not in (input_data.current_volume, input_data.avg_volume, input_data.price_change):
            multiplier = (
                input_data.risk_settings.volume_multiplier
                if input_data.risk_settings
                else app_settings.default_volume_multiplier
            )
            trap = self.detect_trap(
                input_data.current_volume,
                input_data.avg_volume,
                input_data.price_change,
                multiplier,
            )
            volume_ratio = input_data.current_volume / input_data.avg_volume
            trap_type = self.classify_trap(
                input_data.price_change, volume_ratio, input_data.trend
            )

        if None not in (input_data.high, input_data.low, input_data.close):
            cpr = self.calculate_cpr(input_data.high, input_data.low, input_data.close)

        if None not in (
            input_data.advancing_stocks,
            input_data.declining_stocks,
            input_data.breadth_volume_ratio,
        ):
            bias = self.assess_bias(
                input_data.advancing_stocks,
                input_data.declining_stocks,
                input_data.breadth_volume_ratio,
            )

        if trap and trap.is_trap:
            logger.info(
                f"Trap flagged for {input_data.symbol or 'instrument'}: "
                f"{trap_type.value if trap_type else 'unclassified'} ({trap.confidence:.0f}%)"
            )

        return MarketContext(
            symbol=input_data.symbol,
            trap=trap,
            trap_type=trap_type,
            cpr=cpr,
            bias=bias,
        )

    def detect_trap(
        self,
        current_volume: float,
        avg_volume: float,
        price_change: float,
        volume_multiplier: float = 1.5,
    ) -> TrapAssessment:
        return detect_institutional_trap(current_volume, avg_volume, price_change, volume_multiplier)

    def classify_trap(self, price_change: float, volume_ratio: float, trend: Trend) -> Optional[TrapType]:
        return assess_trap_type(price_change, volume_ratio, trend)

    def calculate_cpr(self, high: float, low: float, close: float) -> CPRResult:
        return calculate_cpr(high, low, close, app_settings.narrow_cpr_threshold)

    def assess_bias(self, advancing: int, declining: int, volume_ratio: float) -> MarketBiasResult:
        return assess_market_bias(advancing, declining, volume_ratio)


@lru_cache()
def get_market_service() -> MarketAnalysisService:
    """Get the shared (stateless) market analysis service."""
    return MarketAnalysisService()
