"""Mocked AI recommendations."""

from __future__ import annotations

from typing import Any, Dict, List

RECOMMENDATIONS: List[Dict[str, Any]] = [
    {
        "id": "rec-rebalance-equity",
        "title": "Rebalance equity exposure",
        "description": "Equity allocation has drifted above target; consider trimming towards the strategic weight.",
        "fund_id": None,
        "confidence": 0.82,
    },
    {
        "id": "rec-review-high-risk",
        "title": "Review high-risk funds",
        "description": "Funds flagged High risk should be reviewed against the scheme's risk appetite.",
        "fund_id": None,
        "confidence": 0.74,
    },
    {
        "id": "rec-increase-bonds",
        "title": "Increase duration hedge",
        "description": "Liability-matching bonds are below the hedge ratio target for the next quarter.",
        "fund_id": None,
        "confidence": 0.67,
    },
]


def get_recommendations() -> List[Dict[str, Any]]:
    # Copies, so callers can't mutate the static payload
    return [dict(r) for r in RECOMMENDATIONS]
