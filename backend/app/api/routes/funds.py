"""Fund CRUD routes."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api import dependencies as deps
from app.core.errors import SofiError
from app.models.fund_model import Fund, FundCreate, FundUpdate
from app.services import fund_service

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("/funds", response_model=List[Fund])
async def list_funds():
    return fund_service.list_funds()


@router.get("/funds/{fund_id}", response_model=Fund)
async def get_fund(fund_id: int):
    try:
        return fund_service.get_fund(fund_id)
    except SofiError as e:
        raise deps.to_http(e)


@router.post("/funds", response_model=Fund, status_code=status.HTTP_201_CREATED)
async def create_fund(body: FundCreate, _user: dict = Depends(deps.fund_writers)):
    return fund_service.create_fund(body)


@router.put("/funds", response_model=Fund)
async def update_fund(body: FundUpdate, _user: dict = Depends(deps.fund_writers)):
    try:
        return fund_service.update_fund(body)
    except SofiError as e:
        raise deps.to_http(e)


@router.delete("/funds/{fund_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_fund(fund_id: int, _user: dict = Depends(deps.admins_only)):
    try:
        fund_service.delete_fund(fund_id)
    except SofiError as e:
        raise deps.to_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
