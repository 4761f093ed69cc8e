"""Portfolio models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Holding(BaseModel):
    fund_id: int
    weight: float = Field(..., ge=0)


class PortfolioCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    holdings: List[Holding] = Field(..., min_length=1)


class Portfolio(BaseModel):
    id: int
    name: str
    created_at: str
    holdings: List[Holding]


class HoldingComparison(BaseModel):
    fund_id: int
    name: str
    weight: float
    value: float
    performance: float
    risk_score: float


class MetricSet(BaseModel):
    performance: float
    risk_score: float


class PortfolioComparison(BaseModel):
    portfolio_id: int
    name: str
    holdings: List[HoldingComparison]
    portfolio: MetricSet
    benchmark: MetricSet
    difference: MetricSet
    missing_fund_ids: List[int] = []
