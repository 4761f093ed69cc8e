"""Risk score routes."""

from fastapi import APIRouter, Depends

from app.api import dependencies as deps
from app.core.errors import SofiError
from app.models.dashboard_model import RiskScore
from app.services import risk_service

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("/risk/fund/{fund_id}", response_model=RiskScore)
async def get_fund_risk(fund_id: int):
    try:
        return risk_service.risk_for_fund(fund_id)
    except SofiError as e:
        raise deps.to_http(e)
