"""
MarketDesk Services

Service layer containing the risk & decision engine.
Each service has a defined interface (contract) and implementation;
the pure calculations underneath are exported here for direct use.
"""

from marketdesk.services.base import BaseService, InvalidInputError, ServiceError
from marketdesk.services.decision import compose_reasoning, prioritize_decisions
from marketdesk.services.market import (
    assess_market_bias,
    assess_trap_type,
    calculate_cpr,
    detect_institutional_trap,
)
from marketdesk.services.risk import (
    calculate_position_size,
    calculate_risk_reward,
    validate_against_risk_settings,
)

__all__ = [
    "BaseService",
    "InvalidInputError",
    "ServiceError",
    "calculate_position_size",
    "calculate_risk_reward",
    "detect_institutional_trap",
    "assess_trap_type",
    "calculate_cpr",
    "assess_market_bias",
    "compose_reasoning",
    "prioritize_decisions",
    "validate_against_risk_settings",
]
