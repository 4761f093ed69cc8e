"""API router composition.

All REST endpoints live under `/api/*`.
"""

from fastapi import APIRouter

from app.api.routes.ai import router as ai_router
from app.api.routes.auth import router as auth_router
from app.api.routes.dashboard import router as dashboard_router
from app.api.routes.funds import router as funds_router
from app.api.routes.portfolios import router as portfolios_router
from app.api.routes.reports import router as reports_router
from app.api.routes.risk import router as risk_router


api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(dashboard_router, tags=["dashboard"])
api_router.include_router(funds_router, tags=["funds"])
api_router.include_router(ai_router, tags=["ai"])
api_router.include_router(risk_router, tags=["risk"])
api_router.include_router(portfolios_router, tags=["portfolios"])
api_router.include_router(reports_router, tags=["reports"])
