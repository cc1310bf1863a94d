"""
Decision API Endpoints

Ranking and reasoning for analyst agent decisions.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from marketdesk.schemas.decision import AgentDecision, FundamentalSignals, TechnicalSignals
from marketdesk.services.decision import DecisionBatch, get_decision_service

router = APIRouter()


class RankDecisionsRequest(BaseModel):
    decisions: list[AgentDecision]


class ReasoningRequest(BaseModel):
    technicals: TechnicalSignals
    fundamentals: Optional[FundamentalSignals] = None
    risk_reward_ratio: Optional[float] = None


class ReasoningResponse(BaseModel):
    reasoning: str


@router.post("/rank", response_model=list[AgentDecision])
async def rank_decisions(request: RankDecisionsRequest):
    """
    Order decisions by confidence x risk/reward, highest first.

    Ties keep their submitted order.
    """
    return await get_decision_service().execute(DecisionBatch(decisions=request.decisions))


@router.post("/reasoning", response_model=ReasoningResponse)
async def generate_reasoning(request: ReasoningRequest):
    """
    Compose the justification text for a decision.
    """
    reasoning = get_decision_service().generate_reasoning(
        request.technicals, request.fundamentals, request.risk_reward_ratio
    )
    return ReasoningResponse(reasoning=reasoning)
