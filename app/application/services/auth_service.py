"""Auth service — JWT token management, password hashing and account flows."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import ConflictException, UnauthorizedException, ValidationFailedException
from app.domain.models.user import Role, User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import AuthResult, Principal, ProfileUpdate, RegisterRequest
from app.domain.schemas.user import UserRead

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def token_for(user: User) -> str:
    return create_access_token(data={"id": user.id, "email": user.email, "role": user.role.value})


def authenticate(repo: UserRepository, authorization: Optional[str]) -> Principal:
    """Resolve the `Authorization: Bearer <token>` header into a principal."""
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedException("Access token required")

    payload = decode_access_token(authorization[len("Bearer "):].strip())
    if payload is None:
        raise UnauthorizedException("Invalid or expired token")

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise UnauthorizedException("Invalid or expired token")

    user = repo.get_by_id(user_id)
    if user is None:
        raise UnauthorizedException("User not found")

    return Principal.model_validate(user)


def register(repo: UserRepository, body: RegisterRequest) -> AuthResult:
    email = body.email.strip().lower()
    if repo.get_by_email(email):
        raise ConflictException("Email already exists", field="email")
    if repo.get_by_username(body.username):
        raise ConflictException("Username already exists", field="username")

    data = body.model_dump(exclude={"password", "email"})
    user = repo.create({
        **data,
        "email": email,
        "password": hash_password(body.password),
        "role": Role.USER,
    })
    logger.info("User registered", user_id=user.id, username=user.username)
    return AuthResult(user=UserRead.model_validate(user), token=token_for(user))


def login(repo: UserRepository, email: str, password: str) -> AuthResult:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password):
        raise UnauthorizedException("Invalid email or password")
    return AuthResult(user=UserRead.model_validate(user), token=token_for(user))


def request_password_reset(repo: UserRepository, email: Optional[str]) -> None:
    """Store a one-hour reset token on the account; delivery is log-only."""
    if not email or not email.strip():
        raise ValidationFailedException(
            "Email is required", errors=[{"field": "email", "message": "Email is required"}]
        )

    user = repo.get_by_email(email)
    if user is None:
        logger.info("Password reset requested for unknown email")
        return

    reset_token = secrets.token_urlsafe(24)
    expiry = datetime.now(timezone.utc) + timedelta(minutes=settings.RESET_TOKEN_EXPIRATION_MINUTES)
    repo.update(user, {"reset_token": reset_token, "reset_token_expiry": expiry})
    logger.info(
        "Password reset token issued",
        user_id=user.id,
        email=user.email,
        reset_token=reset_token,
        expires_at=expiry.isoformat(),
    )


def update_profile(repo: UserRepository, principal: Principal, body: ProfileUpdate) -> User:
    user = repo.get_by_id(principal.id)
    if user is None:
        raise UnauthorizedException("User not found")

    data = body.model_dump(exclude_unset=True)
    username = data.get("username")
    if username and username != user.username:
        existing = repo.get_by_username(username)
        if existing is not None and existing.id != user.id:
            raise ConflictException("Username already exists", field="username")
    return repo.update(user, data)


def ensure_default_admin(repo: UserRepository) -> None:
    if repo.get_by_email(settings.DEFAULT_ADMIN_EMAIL):
        return
    repo.create({
        "username": settings.DEFAULT_ADMIN_USERNAME,
        "email": settings.DEFAULT_ADMIN_EMAIL,
        "password": hash_password(settings.DEFAULT_ADMIN_PASSWORD),
        "role": Role.ADMIN,
    })
    logger.info("Default admin user created", email=settings.DEFAULT_ADMIN_EMAIL)
