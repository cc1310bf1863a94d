"""
Market Analysis API Endpoints

Trap detection, CPR and market bias from caller-supplied figures.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from marketdesk.schemas.market import (
    CPRResult,
    MarketBiasResult,
    MarketContext,
    TrapAssessment,
    TrapType,
    Trend,
)
from marketdesk.schemas.risk import RiskSettings
from marketdesk.services.base import InvalidInputError
from marketdesk.services.market import MarketContextInput, get_market_service

router = APIRouter()


class TrapRequest(BaseModel):
    current_volume: float = Field(..., ge=0)
    avg_volume: float
    price_change: float = Field(..., description="Move in %")
    volume_multiplier: float = Field(default=1.5, gt=0)


class TrapTypeRequest(BaseModel):
    price_change: float
    volume_ratio: float = Field(..., ge=0)
    trend: Trend = Trend.SIDEWAYS


class TrapTypeResponse(BaseModel):
    trap_type: Optional[TrapType] = None


class CPRRequest(BaseModel):
    high: float
    low: float
    close: float


class BiasRequest(BaseModel):
    advancing_stocks: int = Field(..., ge=0)
    declining_stocks: int = Field(..., ge=0)
    volume_ratio: float = Field(..., ge=0)


class MarketContextRequest(BaseModel):
    """Any subset of session figures; missing groups are skipped."""

    symbol: Optional[str] = None
    current_volume: Optional[float] = Field(default=None, ge=0)
    avg_volume: Optional[float] = None
    price_change: Optional[float] = None
    trend: Trend = Trend.SIDEWAYS
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    advancing_stocks: Optional[int] = Field(default=None, ge=0)
    declining_stocks: Optional[int] = Field(default=None, ge=0)
    breadth_volume_ratio: Optional[float] = Field(default=None, ge=0)
    risk_settings: Optional[RiskSettings] = None


@router.post("/trap", response_model=TrapAssessment)
async def detect_trap(request: TrapRequest):
    """
    Flag a price move that volume does not confirm.
    """
    try:
        return get_market_service().detect_trap(
            request.current_volume,
            request.avg_volume,
            request.price_change,
            request.volume_multiplier,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/trap-type", response_model=TrapTypeResponse)
async def classify_trap(request: TrapTypeRequest):
    """
    Classify a thin-volume move (null when volume is healthy).
    """
    try:
        trap_type = get_market_service().classify_trap(
            request.price_change, request.volume_ratio, request.trend
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return TrapTypeResponse(trap_type=trap_type)


@router.post("/cpr", response_model=CPRResult)
async def central_pivot_range(request: CPRRequest):
    """
    Central Pivot Range from the prior session's high/low/close.
    """
    try:
        return get_market_service().calculate_cpr(request.high, request.low, request.close)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/bias", response_model=MarketBiasResult)
async def market_bias(request: BiasRequest):
    """
    Market bias from advance/decline breadth and volume.
    """
    try:
        return get_market_service().assess_bias(
            request.advancing_stocks, request.declining_stocks, request.volume_ratio
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/context", response_model=MarketContext)
async def market_context(request: MarketContextRequest):
    """
    Everything the engine can say about one instrument's session.
    """
    input_data = MarketContextInput(
        **request.model_dump(exclude={"risk_settings"}),
        risk_settings=request.risk_settings,
    )

    try:
        return await get_market_service().execute(input_data)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
