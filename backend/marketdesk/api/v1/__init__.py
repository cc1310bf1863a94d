"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from marketdesk.api.v1.endpoints import decisions, market, risk

router = APIRouter()

# Include all endpoint routers
router.include_router(risk.router, prefix="/risk", tags=["Risk Management"])
router.include_router(market.router, prefix="/market", tags=["Market Analysis"])
router.include_router(decisions.router, prefix="/decisions", tags=["Agent Decisions"])
