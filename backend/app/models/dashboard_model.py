"""Dashboard, recommendation and risk response models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class Recommendation(BaseModel):
    id: str
    title: str
    description: str
    fund_id: Optional[int] = None
    confidence: float


class DashboardOverview(BaseModel):
    total_assets: float
    average_performance: float
    risk_warnings: int
    recommendations: List[Recommendation]


class RiskFactor(BaseModel):
    name: str
    contribution: float


class RiskScore(BaseModel):
    fund_id: int
    score: float
    level: str
    factors: List[RiskFactor]
