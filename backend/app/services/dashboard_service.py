"""Dashboard overview aggregation."""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

from app.services import ai_service, fund_service

RISK_WARNING_LEVEL = "high"


def summarize(funds: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate metrics for a list of fund rows."""
    if not funds:
        return {"total_assets": 0.0, "average_performance": 0.0, "risk_warnings": 0, "fund_count": 0}

    values = np.array([f["value"] for f in funds], dtype=float)
    performance = np.array([f["performance"] for f in funds], dtype=float)
    warnings = sum(1 for f in funds if str(f["risk_level"]).strip().lower() == RISK_WARNING_LEVEL)
    return {
        "total_assets": round(float(values.sum()), 2),
        "average_performance": round(float(performance.mean()), 2),
        "risk_warnings": warnings,
        "fund_count": len(funds),
    }


def build_overview() -> Dict[str, Any]:
    summary = summarize(fund_service.list_funds())
    return {
        "total_assets": summary["total_assets"],
        "average_performance": summary["average_performance"],
        "risk_warnings": summary["risk_warnings"],
        "recommendations": ai_service.get_recommendations(),
    }
