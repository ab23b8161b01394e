# workforce/utils/auth.py
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from workforce.config import Settings
from workforce.models import UserRole
from workforce.services import auth_service
from workforce.utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthUser:
    """Identity taken from a verified token; no database lookup involved"""
    id: int
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AuthUser:
    if credentials is None or not credentials.credentials:
        logger.warning("Authentication failed: missing or invalid Authorization header on %s %s",
                       request.method, request.url.path)
        raise AuthenticationError("Missing or invalid Authorization header")

    try:
        payload = auth_service.decode_token(settings, credentials.credentials)
    except AuthenticationError:
        logger.warning("Authentication failed: invalid or expired token on %s %s",
                       request.method, request.url.path)
        raise

    user = AuthUser(id=payload["userId"], email=payload["email"], role=UserRole(payload["role"]))
    logger.debug("Authenticated user %s on %s", user.id, request.url.path)
    return user
