"""
Trade Reasoning Composer

Builds the human-readable justification shown next to a decision.
Each signal maps to one sentence through REASONING_RULES; adding a
signal means adding a rule, nothing else changes.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from marketdesk.schemas.decision import FundamentalSignals, TechnicalSignals

FAVORABLE_RISK_REWARD = 2.0


@dataclass(frozen=True)
class ReasoningInput:
    """Everything a rule may look at."""

    technicals: TechnicalSignals
    fundamentals: Optional[FundamentalSignals] = None
    risk_reward_ratio: Optional[float] = None


@dataclass(frozen=True)
class ReasoningRule:
    """A signal and the sentence it contributes when present."""

    signal: str
    sentence: Callable[[ReasoningInput], Optional[str]]


def _volume_confirmation(ctx: ReasoningInput) -> Optional[str]:
    if ctx.technicals.volume_confirmation:
        return "Strong volume confirmation validates the move"
    return None


def _trend_alignment(ctx: ReasoningInput) -> Optional[str]:
    if ctx.technicals.trend_alignment:
        return "Trade aligns with prevailing trend"
    return None


def _support_resistance(ctx: ReasoningInput) -> Optional[str]:
    return ctx.technicals.support_resistance or None


def _institutional_interest(ctx: ReasoningInput) -> Optional[str]:
    if ctx.fundamentals and ctx.fundamentals.institutional_interest:
        return f"Institutional interest detected in {ctx.fundamentals.sector} sector"
    return None


def _risk_reward(ctx: ReasoningInput) -> Optional[str]:
    ratio = ctx.risk_reward_ratio
    if ratio and ratio > FAVORABLE_RISK_REWARD:
        return f"Favorable risk-reward ratio of {ratio:.2f}:1"
    return None


# Order matters: sentences appear in this order.
REASONING_RULES: tuple[ReasoningRule, ...] = (
    ReasoningRule("volume_confirmation", _volume_confirmation),
    ReasoningRule("trend_alignment", _trend_alignment),
    ReasoningRule("support_resistance", _support_resistance),
    ReasoningRule("institutional_interest", _institutional_interest),
    ReasoningRule("risk_reward", _risk_reward),
)


def compose_reasoning(
    technicals: TechnicalSignals,
    fundamentals: Optional[FundamentalSignals] = None,
    risk_reward_ratio: Optional[float] = None,
    rules: tuple[ReasoningRule, ...] = REASONING_RULES,
) -> str:
    """
    Join one sentence per qualifying signal with ". " and end with ".".
    Returns "" when no signal qualifies.
    """
    ctx = ReasoningInput(
        technicals=technicals,
        fundamentals=fundamentals,
        risk_reward_ratio=risk_reward_ratio,
    )

    parts: list[str] = []
    for rule in rules:
        sentence = rule.sentence(ctx)
        if sentence:
            parts.append(sentence)

    if not parts:
        return ""

    return ". ".join(parts) + "."
