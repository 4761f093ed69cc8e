"""Mocked AI recommendation routes."""

from typing import List

from fastapi import APIRouter, Depends

from app.api import dependencies as deps
from app.models.dashboard_model import Recommendation
from app.services import ai_service

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("/ai/recommendations", response_model=List[Recommendation])
async def get_recommendations():
    return ai_service.get_recommendations()
