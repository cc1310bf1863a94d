"""
Decision Engine

CONTRACT:
    Input:  AgentDecision batches, technical/fundamental signal flags
    Output: Ranked decisions, reasoning text

Decisions are only reordered or described, never mutated.
"""

from marketdesk.services.decision.ranking import decision_score, prioritize_decisions
from marketdesk.services.decision.reasoning import (
    REASONING_RULES,
    ReasoningRule,
    compose_reasoning,
)
from marketdesk.services.decision.service import (
    DecisionBatch,
    DecisionService,
    get_decision_service,
)

__all__ = [
    "decision_score",
    "prioritize_decisions",
    "REASONING_RULES",
    "ReasoningRule",
    "compose_reasoning",
    "DecisionBatch",
    "DecisionService",
    "get_decision_service",
]
