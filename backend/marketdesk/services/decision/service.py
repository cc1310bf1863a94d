"""
Decision Service Implementation

Ranks agent decisions and writes their reasoning text.
The service never changes a decision's status.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from marketdesk.schemas.decision import AgentDecision, FundamentalSignals, TechnicalSignals
from marketdesk.services.base import BaseService
from marketdesk.services.decision.ranking import prioritize_decisions
from marketdesk.services.decision.reasoning import compose_reasoning

logger = logging.getLogger(__name__)


@dataclass
class DecisionBatch:
    """Input for ranking."""

    decisions: list[AgentDecision] = field(default_factory=list)


class DecisionService(BaseService[DecisionBatch, list[AgentDecision]]):
    """Decision ranking and reasoning. Stateless."""

    @property
    def name(self) -> str:
        return "DecisionService"

    async def execute(self, input_data: DecisionBatch) -> list[AgentDecision]:
        ranked = self.prioritize(input_data.decisions)
        if ranked:
            logger.debug(
                f"Ranked {len(ranked)} decisions, top: {ranked[0].stock_symbol} ({ranked[0].id})"
            )
        return ranked

    def prioritize(self, decisions: list[AgentDecision]) -> list[AgentDecision]:
        return prioritize_decisions(decisions)

    def generate_reasoning(
        self,
        technicals: TechnicalSignals,
        fundamentals: Optional[FundamentalSignals] = None,
        risk_reward_ratio: Optional[float] = None,
    ) -> str:
        return compose_reasoning(technicals, fundamentals, risk_reward_ratio)


@lru_cache()
def get_decision_service() -> DecisionService:
    """Get the shared (stateless) decision service."""
    return DecisionService()
