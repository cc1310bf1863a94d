"""
CONTRACT 3: Agent Decisions

Input: Decisions produced by the analyst agents, signal flags
Output: Ranked decisions, reasoning text

Decisions are created PENDING by an external producer and moved to
APPROVED/REJECTED by a human. The engine only scores and reorders them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class AgentType(str, Enum):
    MACRO_ANALYST = "MACRO_ANALYST"
    CASH_MARKET_SPECIALIST = "CASH_MARKET_SPECIALIST"
    STRATEGY_LOGIC = "STRATEGY_LOGIC"
    PATTERN_RECOGNITION = "PATTERN_RECOGNITION"


class DecisionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"
    ALERT = "ALERT"
    WARNING = "WARNING"


class DecisionStatus(str, Enum):
    PENDING = "PENDING"  # Awaiting human review
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    EXECUTED = "EXECUTED"  # Human took the trade
    EXPIRED = "EXPIRED"  # Opportunity passed


# =============================================================================
# AgentDecision
# =============================================================================


class AgentDecision(BaseModel):
    """A trade decision suggested by one of the analyst agents."""

    id: str
    stock_symbol: str
    decision_type: DecisionType
    agent_type: AgentType = AgentType.STRATEGY_LOGIC
    reasoning: str = ""
    confidence_score: Optional[float] = Field(default=None, ge=0, le=100)
    suggested_price: Optional[float] = None
    suggested_quantity: Optional[int] = None
    stop_loss: Optional[float] = None
    target_price: Optional[float] = None
    risk_reward_ratio: Optional[float] = None
    status: DecisionStatus = DecisionStatus.PENDING
    created_at: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True


# =============================================================================
# Reasoning Signals
# =============================================================================


class TechnicalSignals(BaseModel):
    """Technical confirmation flags behind a decision."""

    volume_confirmation: bool = False
    trend_alignment: bool = False
    support_resistance: str = Field(
        default="",
        description="Free-text support/resistance note, used verbatim",
    )


class FundamentalSignals(BaseModel):
    """Fundamental context behind a decision."""

    sector: str = ""
    market_cap: Optional[float] = None
    institutional_interest: bool = False
