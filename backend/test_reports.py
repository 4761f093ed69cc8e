import io

import pandas as pd
import pytest

from app.services import report_service


def test_csv_export(client, headers_for):
    r = client.get("/api/reports/export", headers=headers_for("Analyst"))
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    disposition = r.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="sofi_funds_')
    assert disposition.endswith('.csv"')

    df = pd.read_csv(io.StringIO(r.text))
    assert list(df.columns) == report_service.REPORT_COLUMNS
    assert len(df) == 6
    row = df[df["id"] == 3].iloc[0]
    assert row["risk_score"] == pytest.approx(83.6)
    assert row["risk_band"] == "High"


def test_json_export(client, headers_for):
    r = client.get("/api/reports/export?format=json", headers=headers_for("Manager"))
    assert r.status_code == 200
    report = r.json()
    assert report["report_id"]
    assert report["title"] == "SOFI Fund Report"
    assert report["summary"]["fund_count"] == 6
    assert report["summary"]["risk_warnings"] == 2
    assert report["summary"]["total_assets"] == pytest.approx(53_850_000.0)
    assert {row["id"] for row in report["rows"]} == {1, 2, 3, 4, 5, 6}


def test_unknown_format_rejected(client, headers_for):
    r = client.get("/api/reports/export?format=xlsx", headers=headers_for("Admin"))
    assert r.status_code == 400


def test_viewer_cannot_export(client, headers_for):
    assert client.get("/api/reports/export", headers=headers_for("Viewer")).status_code == 403


def test_csv_export_with_no_funds_has_header_only():
    text = report_service.to_csv([])
    assert text.strip() == ",".join(report_service.REPORT_COLUMNS)
