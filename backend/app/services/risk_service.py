"""Deterministic fund risk scoring."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from app.services import fund_service

BASE_SCORES = {"low": 20.0, "medium": 50.0, "high": 80.0}
DEFAULT_BASE = 50.0
MAX_DRAWDOWN_PENALTY = 20.0
OUTPERFORMANCE_THRESHOLD = 10.0
OUTPERFORMANCE_CREDIT = 5.0


def classify(score: float) -> str:
    if score < 35:
        return "Low"
    if score < 65:
        return "Medium"
    return "High"


def score_fund(fund: Dict[str, Any]) -> Dict[str, Any]:
    """
    Score a fund on a 0-100 scale.

    - Base from the declared risk level (Low 20 / Medium 50 / High 80)
    - Negative performance adds |performance|, capped at 20
    - Performance above 10% takes 5 off
    """
    base = BASE_SCORES.get(str(fund["risk_level"]).strip().lower(), DEFAULT_BASE)
    factors = [{"name": "risk_level", "contribution": base}]

    performance = float(fund["performance"])
    if performance < 0:
        factors.append({"name": "negative_performance", "contribution": min(MAX_DRAWDOWN_PENALTY, abs(performance))})
    elif performance > OUTPERFORMANCE_THRESHOLD:
        factors.append({"name": "outperformance", "contribution": -OUTPERFORMANCE_CREDIT})

    raw = sum(f["contribution"] for f in factors)
    score = round(float(np.clip(raw, 0.0, 100.0)), 2)
    return {
        "fund_id": fund["id"],
        "score": score,
        "level": classify(score),
        "factors": factors,
    }


def risk_for_fund(fund_id: int) -> Dict[str, Any]:
    return score_fund(fund_service.get_fund(fund_id))
