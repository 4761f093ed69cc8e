"""Service-level tests that bypass HTTP."""
import pytest

from app.core import security
from app.core.errors import ConflictError, InvalidCredentialsError, NotFoundError, TokenError, ValidationError
from app.models import database as db
from app.models.fund_model import FundCreate, FundUpdate, RiskLevel
from app.services import auth_service, dashboard_service, fund_service


def test_password_hash_roundtrip():
    hashed = security.hash_password("Pension2024!", rounds=4)
    assert hashed != "Pension2024!"
    assert security.verify_password("Pension2024!", hashed)
    assert not security.verify_password("pension2024!", hashed)


def test_verify_password_with_corrupt_hash():
    assert security.verify_password("anything", "not-a-bcrypt-hash") is False


def test_decode_rejects_garbage():
    with pytest.raises(TokenError):
        security.decode_access_token("abc.def.ghi")


def test_login_service(seeded_db):
    result = auth_service.login("manager@sofi.local", "Manager123!")
    assert result["role"] == "Manager"
    user = auth_service.resolve_token(result["token"])
    assert user["email"] == "manager@sofi.local"

    with pytest.raises(InvalidCredentialsError):
        auth_service.login("manager@sofi.local", "Admin123!")


def test_register_service_validation(seeded_db):
    with pytest.raises(ValidationError):
        auth_service.register_user("a@sofi.local", "Password1!", "Owner")
    with pytest.raises(ConflictError):
        auth_service.register_user("analyst@sofi.local", "Password1!", "Analyst")
    with pytest.raises(NotFoundError):
        auth_service.get_user(4040)


def test_fund_service_crud(seeded_db):
    fund = fund_service.create_fund(FundCreate(name="  Index Tracker ", value=10.0, performance=1.5, risk_level=RiskLevel.LOW))
    assert fund["name"] == "Index Tracker"
    assert fund["risk_level"] == "Low"

    updated = fund_service.update_fund(FundUpdate(id=fund["id"], name="Index Tracker", value=20.0, performance=1.5, risk_level="High"))
    assert updated["value"] == 20.0
    assert updated["risk_level"] == "High"

    fund_service.delete_fund(fund["id"])
    with pytest.raises(NotFoundError):
        fund_service.get_fund(fund["id"])
    with pytest.raises(NotFoundError):
        fund_service.delete_fund(fund["id"])


def test_seed_is_idempotent(seeded_db):
    from app.demo.seed_data import seed_demo_data

    assert seed_demo_data() == {"users": 0, "funds": 0}
    stats = db.get_stats()
    assert stats["users"] == 4
    assert stats["funds"] == 6
    assert stats["users_by_role"] == {"Admin": 1, "Analyst": 1, "Manager": 1, "Viewer": 1}


def test_summarize_is_case_insensitive_on_high():
    funds = [
        {"value": 1.0, "performance": 1.0, "risk_level": "HIGH"},
        {"value": 2.0, "performance": 2.0, "risk_level": "high "},
        {"value": 3.0, "performance": 3.0, "risk_level": "Low"},
    ]
    summary = dashboard_service.summarize(funds)
    assert summary == {"total_assets": 6.0, "average_performance": 2.0, "risk_warnings": 2, "fund_count": 3}


def test_hash_password_rejects_over_long_bytes():
    with pytest.raises(ValidationError):
        security.hash_password("€" * 25, rounds=4)
