"""Report models (optional typing layer)."""

from __future__ import annotations

from typing import Any, Dict, List
from pydantic import BaseModel


class FundReport(BaseModel):
    report_id: str
    generated_at: str
    title: str
    summary: Dict[str, Any]
    rows: List[Dict[str, Any]]
