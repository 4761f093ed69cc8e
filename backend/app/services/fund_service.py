"""Fund CRUD services (thin wrappers around persistence)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from app.core.errors import NotFoundError
from app.models import database as db
from app.models.fund_model import FundCreate, FundUpdate

logger = logging.getLogger(__name__)


def _risk_value(risk_level) -> str:
    return risk_level.value if hasattr(risk_level, "value") else str(risk_level)


def list_funds() -> List[Dict[str, Any]]:
    return db.list_funds()


def get_fund(fund_id: int) -> Dict[str, Any]:
    fund = db.get_fund(fund_id)
    if fund is None:
        raise NotFoundError("Fund", fund_id)
    return fund


def create_fund(data: FundCreate) -> Dict[str, Any]:
    fund = db.create_fund(data.name, data.value, data.performance, _risk_value(data.risk_level))
    logger.info("Created fund %s (%s)", fund["id"], fund["name"])
    return fund


def update_fund(data: FundUpdate) -> Dict[str, Any]:
    fund = db.update_fund(data.id, data.name, data.value, data.performance, _risk_value(data.risk_level))
    if fund is None:
        raise NotFoundError("Fund", data.id)
    logger.info("Updated fund %s", fund["id"])
    return fund


def delete_fund(fund_id: int):
    if not db.delete_fund(fund_id):
        raise NotFoundError("Fund", fund_id)
    logger.info("Deleted fund %s", fund_id)
