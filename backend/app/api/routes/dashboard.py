"""Dashboard routes."""

from fastapi import APIRouter, Depends

from app.api import dependencies as deps
from app.models.dashboard_model import DashboardOverview
from app.services import dashboard_service

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("/dashboard/overview", response_model=DashboardOverview)
async def get_overview():
    return dashboard_service.build_overview()
