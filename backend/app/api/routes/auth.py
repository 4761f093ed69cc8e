"""Auth routes: login, current user, registration."""

from fastapi import APIRouter, Depends, status

from app.api import dependencies as deps
from app.core.errors import SofiError
from app.models.user_model import LoginRequest, LoginResponse, RegisterRequest, User
from app.services import auth_service

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse)
def login(body: LoginRequest):
    try:
        return auth_service.login(body.email, body.password)
    except SofiError as e:
        raise deps.to_http(e)


@router.get("/auth/me", response_model=User)
async def me(user: dict = Depends(deps.get_current_user)):
    return user


@router.post("/auth/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, _admin: dict = Depends(deps.admins_only)):
    try:
        return auth_service.register_user(body.email, body.password, body.role)
    except SofiError as e:
        raise deps.to_http(e)
