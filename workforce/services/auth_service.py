# workforce/services/auth_service.py
"""
Registration, login and bearer-token handling.

Tokens carry ``{userId, email, role}`` and are signed with the secret from
the application settings. There is no refresh flow: clients log in again
once a token expires.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from workforce.config import Settings
from workforce.models import User, UserRole
from workforce.queries import user_queries
from workforce.utils.errors import AuthenticationError, ConflictError, ValidationError
from workforce.utils.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def public_user(user: User) -> dict:
    """The user fields safe to hand back to clients"""
    return {"id": user.id, "email": user.email, "role": UserRole(user.role).value}


def sign_token(settings: Settings, user: User) -> str:
    payload = {"userId": user.id, "email": user.email, "role": UserRole(user.role).value}
    return create_access_token(
        payload,
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.jwt_expires_minutes,
    )


def decode_token(settings: Settings, token: str) -> dict:
    """Return the verified claims or raise AuthenticationError"""
    try:
        payload = decode_access_token(token, settings.jwt_secret, settings.jwt_algorithm)
    except JWTError:
        raise AuthenticationError("Invalid or expired token")

    if not isinstance(payload.get("userId"), int) or not payload.get("email"):
        raise AuthenticationError("Invalid or expired token")
    if payload.get("role") not in {role.value for role in UserRole}:
        raise AuthenticationError("Invalid or expired token")
    return payload


def register(db: Session, settings: Settings, email: str, password: str, role: Optional[UserRole] = None) -> dict:
    logger.debug("Register attempt for %s", email)

    email = normalize_email(email)
    if not email:
        logger.warning("Registration failed: email is required")
        raise ValidationError("Email is required")

    if not password or len(password) < MIN_PASSWORD_LENGTH:
        logger.warning("Registration failed: password too short for %s", email)
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if user_queries.user_exists_by_email(db, email):
        logger.warning("Registration failed: %s already registered", email)
        raise ConflictError("Email already registered")

    role = UserRole(role) if role else UserRole.EMPLOYEE
    password_hash = hash_password(password, rounds=settings.bcrypt_rounds)
    try:
        user = user_queries.create_user(db, email=email, password_hash=password_hash, role=role)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        logger.warning("Registration failed: %s already registered", email)
        raise ConflictError("Email already registered")

    logger.info("User registered", extra={"user_id": user.id, "role": role.value})
    return {"user": public_user(user), "token": sign_token(settings, user)}


def login(db: Session, settings: Settings, email: str, password: str) -> dict:
    logger.debug("Login attempt for %s", email)

    email = normalize_email(email)
    if not email:
        raise ValidationError("Email is required")
    if not password:
        raise ValidationError("Password is required")

    # Unknown email and wrong password must be indistinguishable to the caller
    user = user_queries.get_user_by_email(db, email)
    if user is None or not user.password_hash:
        logger.warning("Login failed: no user for %s", email)
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.warning("Login failed: wrong password for %s", email)
        raise AuthenticationError(INVALID_CREDENTIALS)

    logger.info("User logged in", extra={"user_id": user.id})
    return {"user": public_user(user), "token": sign_token(settings, user)}
