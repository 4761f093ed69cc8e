"""
SOFI Dashboard API
Demo seed data — one user per role plus a small pension fund universe
"""
import logging
from typing import Any, Dict, List

from app.core import security
from app.models import database as db

logger = logging.getLogger(__name__)

DEMO_USERS: List[Dict[str, str]] = [
    {"email": "admin@sofi.local", "password": "Admin123!", "role": "Admin"},
    {"email": "analyst@sofi.local", "password": "Analyst123!", "role": "Analyst"},
    {"email": "manager@sofi.local", "password": "Manager123!", "role": "Manager"},
    {"email": "viewer@sofi.local", "password": "Viewer123!", "role": "Viewer"},
]

DEMO_FUNDS: List[Dict[str, Any]] = [
    {"name": "Nordic Pension Equity", "value": 12_500_000.0, "performance": 8.4, "risk_level": "Medium"},
    {"name": "Global Bond Core", "value": 18_200_000.0, "performance": 2.1, "risk_level": "Low"},
    {"name": "Emerging Markets Growth", "value": 4_750_000.0, "performance": -3.6, "risk_level": "High"},
    {"name": "Infrastructure Income", "value": 9_300_000.0, "performance": 5.2, "risk_level": "Medium"},
    {"name": "Tech Innovation", "value": 3_100_000.0, "performance": 14.8, "risk_level": "High"},
    {"name": "Money Market Reserve", "value": 6_000_000.0, "performance": 1.3, "risk_level": "Low"},
]


def seed_demo_data() -> Dict[str, int]:
    """Insert demo users and funds into empty tables. Returns what was inserted."""
    inserted = {"users": 0, "funds": 0}

    if db.count_users() == 0:
        for u in DEMO_USERS:
            db.create_user(u["email"], security.hash_password(u["password"]), u["role"])
        inserted["users"] = len(DEMO_USERS)

    if db.count_funds() == 0:
        for f in DEMO_FUNDS:
            db.create_fund(f["name"], f["value"], f["performance"], f["risk_level"])
        inserted["funds"] = len(DEMO_FUNDS)

    logger.info("Seeded %d users and %d funds", inserted["users"], inserted["funds"])
    return inserted
