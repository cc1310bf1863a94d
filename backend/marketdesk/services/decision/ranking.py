"""
Decision Ranking

Orders a batch of agent decisions so the strongest ideas surface first.
"""

from typing import Iterable

from marketdesk.schemas.decision import AgentDecision


def decision_score(decision: AgentDecision) -> float:
    """confidence x risk/reward; missing confidence is 0, missing (or zero) ratio is 1."""
    confidence = decision.confidence_score or 0
    ratio = decision.risk_reward_ratio or 1
    return confidence * ratio


def prioritize_decisions(decisions: Iterable[AgentDecision]) -> list[AgentDecision]:
    """
    Return a new list, highest score first.

    sorted() is stable, so equal scores keep their input order.
    The caller's sequence is left untouched.
    """
    return sorted(decisions, key=decision_score, reverse=True)
