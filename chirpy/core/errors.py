# chirpy/core/errors.py
from __future__ import annotations


class ChirpyError(Exception):
    """Base of every error the core raises on purpose."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StoreError(ChirpyError):
    status_code = 500
    default_message = "Unable to access database"


class ValidationFailed(ChirpyError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(ChirpyError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ChirpyError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ChirpyError):
    status_code = 404
    default_message = "Not found"


class RefreshTokenExpired(NotFound):
    default_message = "Token expired"


class EmailTaken(ChirpyError):
    status_code = 409
    default_message = "A user with that email already exists"
