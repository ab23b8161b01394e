# workforce/utils/errors.py
"""
Domain errors raised by services and the authorization gate.

Every error carries the HTTP status it maps to, so the application-level
exception handler can turn it into a JSON envelope without knowing which
layer raised it.
"""

from typing import Optional


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class AuthorizationError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500


def status_for_message(message: str) -> int:
    """Best-effort status for errors that are not AppError instances"""
    if message == "Unauthorized":
        return 401
    if message == "Forbidden":
        return 403
    if "not found" in message:
        return 404
    return 500
