"""Portfolio services: creation and comparison against the fund universe."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import numpy as np

from app.core.errors import NotFoundError, ValidationError
from app.models import database as db
from app.models.portfolio_model import PortfolioCreate
from app.services import risk_service

logger = logging.getLogger(__name__)


def list_portfolios() -> List[Dict[str, Any]]:
    return db.list_portfolios()


def get_portfolio(portfolio_id: int) -> Dict[str, Any]:
    portfolio = db.get_portfolio(portfolio_id)
    if portfolio is None:
        raise NotFoundError("Portfolio", portfolio_id)
    return portfolio


def create_portfolio(data: PortfolioCreate) -> Dict[str, Any]:
    # Merge duplicate fund ids
    weights: Dict[int, float] = {}
    for h in data.holdings:
        if h.weight < 0:
            raise ValidationError("Holding weights must be non-negative.")
        weights[h.fund_id] = weights.get(h.fund_id, 0.0) + h.weight

    if not weights:
        raise ValidationError("A portfolio needs at least one holding.")
    if sum(weights.values()) <= 0:
        raise ValidationError("Holding weights must sum to more than zero.")

    known = db.get_funds_by_ids(list(weights))
    for fund_id in weights:
        if fund_id not in known:
            raise NotFoundError("Fund", fund_id)

    portfolio = db.create_portfolio(data.name, sorted(weights.items()))
    logger.info("Created portfolio %s with %d holdings", portfolio["id"], len(weights))
    return portfolio


def _metrics(performance: np.ndarray, risk: np.ndarray, weights: np.ndarray) -> Dict[str, float]:
    return {
        "performance": round(float(np.dot(weights, performance)), 4),
        "risk_score": round(float(np.dot(weights, risk)), 4),
    }


def compare(portfolio_id: int) -> Dict[str, Any]:
    """
    Compare a portfolio with the equal-weighted benchmark of all funds.

    Weights are renormalised over the holdings whose fund still exists;
    holdings pointing at deleted funds are reported in missing_fund_ids.
    """
    portfolio = get_portfolio(portfolio_id)
    fund_ids = [h["fund_id"] for h in portfolio["holdings"]]
    funds = db.get_funds_by_ids(fund_ids)

    present = [h for h in portfolio["holdings"] if h["fund_id"] in funds]
    missing = [h["fund_id"] for h in portfolio["holdings"] if h["fund_id"] not in funds]

    raw_weights = np.array([h["weight"] for h in present], dtype=float)
    if not present or raw_weights.sum() <= 0:
        raise ValidationError("Portfolio has no remaining holdings to compare.")
    weights = raw_weights / raw_weights.sum()

    rows = []
    for h, w in zip(present, weights):
        fund = funds[h["fund_id"]]
        rows.append(
            {
                "fund_id": fund["id"],
                "name": fund["name"],
                "weight": round(float(w), 6),
                "value": fund["value"],
                "performance": fund["performance"],
                "risk_score": risk_service.score_fund(fund)["score"],
            }
        )

    port = _metrics(
        np.array([r["performance"] for r in rows], dtype=float),
        np.array([r["risk_score"] for r in rows], dtype=float),
        weights,
    )

    universe = db.list_funds()
    uni_perf = np.array([f["performance"] for f in universe], dtype=float)
    uni_risk = np.array([risk_service.score_fund(f)["score"] for f in universe], dtype=float)
    bench = _metrics(uni_perf, uni_risk, np.full(len(universe), 1.0 / len(universe)))

    return {
        "portfolio_id": portfolio["id"],
        "name": portfolio["name"],
        "holdings": rows,
        "portfolio": port,
        "benchmark": bench,
        "difference": {
            "performance": round(port["performance"] - bench["performance"], 4),
            "risk_score": round(port["risk_score"] - bench["risk_score"], 4),
        },
        "missing_fund_ids": missing,
    }
