"""Fund models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class FundCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    value: float = Field(..., ge=0)
    performance: float = Field(..., description="Performance in percent")
    risk_level: RiskLevel


class FundUpdate(FundCreate):
    id: int


class Fund(BaseModel):
    id: int
    name: str
    value: float
    performance: float
    risk_level: str
