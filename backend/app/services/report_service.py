"""Report helpers."""

from __future__ import annotations

from datetime import datetime
import uuid
from typing import Any, Dict, List

import pandas as pd

from app.services import dashboard_service, fund_service, risk_service

EXPORT_FORMATS = ("csv", "json")
REPORT_COLUMNS = ["id", "name", "value", "performance", "risk_level", "risk_score", "risk_band"]


def build_rows() -> List[Dict[str, Any]]:
    rows = []
    for fund in fund_service.list_funds():
        risk = risk_service.score_fund(fund)
        rows.append({**fund, "risk_score": risk["score"], "risk_band": risk["level"]})
    return rows


def export_filename(generated_at: datetime, fmt: str) -> str:
    return f"sofi_funds_{generated_at.strftime('%Y%m%dT%H%M%SZ')}.{fmt}"


def to_csv(rows: List[Dict[str, Any]]) -> str:
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    return df.to_csv(index=False)


def build_report(rows: List[Dict[str, Any]], generated_at: datetime) -> Dict[str, Any]:
    summary = dashboard_service.summarize(rows)
    return {
        "report_id": str(uuid.uuid4()),
        "generated_at": generated_at.isoformat(),
        "title": "SOFI Fund Report",
        "summary": summary,
        "rows": rows,
    }
