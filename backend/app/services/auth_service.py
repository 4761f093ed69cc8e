"""Authentication services: credential check, token issue and resolution."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict

from app.core import security
from app.core.errors import ConflictError, InvalidCredentialsError, NotFoundError, TokenError, ValidationError
from app.models import database as db
from app.models.user_model import Role

logger = logging.getLogger(__name__)

VALID_ROLES = [r.value for r in Role]


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": user["id"], "email": user["email"], "role": user["role"]}


def login(email: str, password: str) -> Dict[str, Any]:
    """Verify credentials and issue a signed token.

    Unknown email and wrong password fail the same way so callers can't
    probe which accounts exist.
    """
    user = db.get_user_by_email(email)
    if user is None or not security.verify_password(password, user["password_hash"]):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentialsError("Invalid credentials")

    token = security.create_access_token(user["id"], user["email"], user["role"])
    logger.info("User %s logged in as %s", user["email"], user["role"])
    return {"token": token, "role": user["role"]}


def register_user(email: str, password: str, role: str) -> Dict[str, Any]:
    role = role.value if isinstance(role, Role) else role
    if role not in VALID_ROLES:
        raise ValidationError(f"role must be one of {VALID_ROLES}")
    email = email.strip()
    if db.get_user_by_email(email) is not None:
        raise ConflictError(f"User {email} already exists.")

    try:
        user = db.create_user(email, security.hash_password(password), role)
    except sqlite3.IntegrityError as e:
        raise ConflictError(f"User {email} already exists.") from e
    logger.info("Registered user %s with role %s", email, role)
    return public_user(user)


def get_user(user_id: int) -> Dict[str, Any]:
    user = db.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return public_user(user)


def resolve_token(token: str) -> Dict[str, Any]:
    """Decode a bearer token and load the user it names."""
    claims = security.decode_access_token(token)
    user = db.get_user(int(claims["sub"]))
    if user is None:
        raise TokenError("User no longer exists.")
    return public_user(user)
