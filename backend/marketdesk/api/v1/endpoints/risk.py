"""
Risk API Endpoints

Position sizing, risk/reward, risk-limit validation and portfolio exposure.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from marketdesk.schemas.risk import (
    ExposureSummary,
    PortfolioPosition,
    PositionSizeCalculation,
    RiskSettings,
    TradeEvaluation,
    ValidationResult,
)
from marketdesk.services.base import InvalidInputError
from marketdesk.services.risk import default_risk_settings, get_risk_service

router = APIRouter()


class PositionSizeRequest(BaseModel):
    """Request to size a position."""

    capital: float
    risk_percentage: float
    entry_price: float
    stop_loss: float


class RiskRewardRequest(BaseModel):
    """Request for a reward:risk ratio."""

    entry_price: float
    stop_loss: float
    target_price: float


class RiskRewardResponse(BaseModel):
    risk_reward_ratio: float


class ValidateTradeRequest(BaseModel):
    """Request to check a position against risk limits."""

    position_value: float = Field(..., ge=0)
    capital_at_risk: float = Field(..., ge=0)
    risk_settings: RiskSettings


class EvaluateTradeRequest(BaseModel):
    """Request for the full risk calculator."""

    entry_price: float
    stop_loss: float
    target_price: Optional[float] = None
    risk_settings: Optional[RiskSettings] = None


class ExposureRequest(BaseModel):
    """Request for the portfolio exposure summary."""

    positions: list[PortfolioPosition] = Field(default_factory=list)
    risk_settings: Optional[RiskSettings] = None


@router.get("/defaults", response_model=RiskSettings)
async def get_default_risk_settings():
    """
    Get the starting risk settings for a new trader.
    """
    return default_risk_settings()


@router.post("/position-size", response_model=PositionSizeCalculation)
async def position_size(request: PositionSizeRequest):
    """
    Calculate recommended quantity for a risk budget.

    Quantity = floor(capital x risk% / |entry - stop|)
    """
    try:
        return get_risk_service().calculate_position_size(
            request.capital,
            request.risk_percentage,
            request.entry_price,
            request.stop_loss,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/risk-reward", response_model=RiskRewardResponse)
async def risk_reward(request: RiskRewardRequest):
    """
    Calculate reward:risk ratio for a trade.
    """
    try:
        ratio = get_risk_service().calculate_risk_reward(
            request.entry_price, request.stop_loss, request.target_price
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return RiskRewardResponse(risk_reward_ratio=ratio)


@router.post("/validate", response_model=ValidationResult)
async def validate_trade(request: ValidateTradeRequest):
    """
    Check a position against risk limits.

    Limit breaches come back as violations with HTTP 200.
    """
    return get_risk_service().validate_trade(
        request.position_value, request.capital_at_risk, request.risk_settings
    )


@router.post("/evaluate", response_model=TradeEvaluation)
async def evaluate_trade(request: EvaluateTradeRequest):
    """
    Size, score and validate a trade in one call.

    Uses default risk settings when none are supplied.
    Target defaults to entry + 5%.
    """
    settings = request.risk_settings or default_risk_settings()

    try:
        return get_risk_service().evaluate_trade(
            entry_price=request.entry_price,
            stop_loss=request.stop_loss,
            settings=settings,
            target_price=request.target_price,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/exposure", response_model=ExposureSummary)
async def portfolio_exposure(request: ExposureRequest):
    """
    Total exposure and P&L across the caller's open positions.

    Uses default risk settings when none are supplied.
    """
    settings = request.risk_settings or default_risk_settings()

    try:
        return get_risk_service().summarize_exposure(request.positions, settings)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
