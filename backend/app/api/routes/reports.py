"""Report export routes."""

from __future__ import annotations

from datetime import datetime, timezone
import io

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, StreamingResponse

from app.api import dependencies as deps
from app.models.report_model import FundReport
from app.services import report_service

router = APIRouter()


@router.get("/reports/export")
async def export_report(format: str = "csv", _user: dict = Depends(deps.report_readers)):
    """
    Export every fund with its computed risk score.

    - `csv` (default): downloadable attachment
    - `json`: report object with summary aggregates and the same rows
    """
    fmt = format.lower()
    if fmt not in report_service.EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"format must be one of {list(report_service.EXPORT_FORMATS)}")

    generated_at = datetime.now(timezone.utc)
    rows = report_service.build_rows()

    if fmt == "json":
        report = FundReport(**report_service.build_report(rows, generated_at))
        return JSONResponse(content=report.model_dump())

    filename = report_service.export_filename(generated_at, "csv")
    return StreamingResponse(
        io.StringIO(report_service.to_csv(rows)),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
