"""
Risk Validation Engine

CONTRACT:
    Input:  Entry / stop / target prices + RiskSettings
    Output: PositionSizeCalculation, risk/reward ratio, ValidationResult

RESPONSIBILITIES:
    - Size positions from a risk budget
    - Calculate reward:risk ratio
    - Check position value and capital at risk against limits
    - Summarize exposure and P&L across open positions

PURE PYTHON - All rules are deterministic and auditable.
Limit breaches are returned as violations, never raised.
"""

from marketdesk.services.risk.calculations import (
    calculate_position_size,
    calculate_risk_reward,
    default_target,
    summarize_exposure,
    validate_against_risk_settings,
)
from marketdesk.services.risk.interface import RiskServiceInterface, RiskValidationInput
from marketdesk.services.risk.service import (
    RiskValidationService,
    default_risk_settings,
    get_risk_service,
)

__all__ = [
    "calculate_position_size",
    "calculate_risk_reward",
    "default_target",
    "summarize_exposure",
    "validate_against_risk_settings",
    "RiskServiceInterface",
    "RiskValidationInput",
    "RiskValidationService",
    "default_risk_settings",
    "get_risk_service",
]
