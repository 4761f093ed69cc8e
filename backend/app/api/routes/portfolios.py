"""Portfolio routes, including comparison against the fund universe."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from app.api import dependencies as deps
from app.core.errors import SofiError
from app.models.portfolio_model import Portfolio, PortfolioComparison, PortfolioCreate
from app.services import portfolio_service

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("/portfolios", response_model=List[Portfolio])
async def list_portfolios():
    return portfolio_service.list_portfolios()


@router.post("/portfolios", response_model=Portfolio, status_code=status.HTTP_201_CREATED)
async def create_portfolio(body: PortfolioCreate, _user: dict = Depends(deps.portfolio_writers)):
    try:
        return portfolio_service.create_portfolio(body)
    except SofiError as e:
        raise deps.to_http(e)


@router.get("/portfolios/{portfolio_id}", response_model=Portfolio)
async def get_portfolio(portfolio_id: int):
    try:
        return portfolio_service.get_portfolio(portfolio_id)
    except SofiError as e:
        raise deps.to_http(e)


@router.get("/portfolios/{portfolio_id}/compare", response_model=PortfolioComparison)
async def compare_portfolio(portfolio_id: int):
    try:
        return portfolio_service.compare(portfolio_id)
    except SofiError as e:
        raise deps.to_http(e)
