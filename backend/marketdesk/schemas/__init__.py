"""
MarketDesk Schema Contracts

This module defines all JSON contracts between the engine and its callers.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from marketdesk.schemas.risk import (
    RiskAppetite,
    RiskSettings,
    PositionSizeCalculation,
    ValidationResult,
    TradeEvaluation,
    PortfolioPosition,
    ExposureSummary,
)
from marketdesk.schemas.market import (
    Trend,
    TrapType,
    MarketBias,
    TrapAssessment,
    CPRResult,
    MarketBiasResult,
    MarketContext,
)
from marketdesk.schemas.decision import (
    AgentType,
    DecisionType,
    DecisionStatus,
    AgentDecision,
    TechnicalSignals,
    FundamentalSignals,
)

__all__ = [
    # Risk
    "RiskAppetite",
    "RiskSettings",
    "PositionSizeCalculation",
    "ValidationResult",
    "TradeEvaluation",
    "PortfolioPosition",
    "ExposureSummary",
    # Market
    "Trend",
    "TrapType",
    "MarketBias",
    "TrapAssessment",
    "CPRResult",
    "MarketBiasResult",
    "MarketContext",
    # Decision
    "AgentType",
    "DecisionType",
    "DecisionStatus",
    "AgentDecision",
    "TechnicalSignals",
    "FundamentalSignals",
]
