"""Auth API routes — register, login, password reset, profile."""

from fastapi import APIRouter, Depends, status

from app.application.services import auth_service
from app.core.responses import success_response
from app.domain.schemas.auth import LoginRequest, Principal, ProfileUpdate, RegisterRequest, ResetPasswordRequest
from app.domain.schemas.user import UserDetail, UserRead
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.api.deps import get_current_user
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: SQLAlchemyUserRepository = Depends(get_user_repository)):
    result = auth_service.register(repo, body)
    return success_response(result, "User registered successfully")


@router.post("/login")
def login(body: LoginRequest, repo: SQLAlchemyUserRepository = Depends(get_user_repository)):
    result = auth_service.login(repo, body.email, body.password)
    return success_response(result, "Login successful")


@router.post("/reset-password")
def reset_password(body: ResetPasswordRequest, repo: SQLAlchemyUserRepository = Depends(get_user_repository)):
    auth_service.request_password_reset(repo, body.email)
    return success_response({}, "If an account with that email exists, a password reset link has been sent")


@router.get("/profile")
def get_profile(
    user: Principal = Depends(get_current_user),
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
):
    account = repo.get_by_id(user.id)
    return success_response(UserDetail.model_validate(account), "Profile retrieved successfully")


@router.put("/profile")
def update_profile(
    body: ProfileUpdate,
    user: Principal = Depends(get_current_user),
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
):
    account = auth_service.update_profile(repo, user, body)
    return success_response(UserRead.model_validate(account), "Profile updated successfully")
