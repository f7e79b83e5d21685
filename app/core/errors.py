"""
Error types raised by the services and mapped to HTTP responses in app.main.
"""
from typing import List, Optional


class AppError(Exception):
    status_code = 500

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail

    def to_body(self) -> dict:
        return {"detail": self.detail}


class ValidationError(AppError):
    """Malformed input. Carries the offending field(s) and the reason."""

    status_code = 400

    def __init__(self, field: Optional[str] = None, reason: str = "Invalid value",
                 errors: Optional[List[dict]] = None):
        self.errors = errors if errors is not None else [{"field": field, "reason": reason}]
        super().__init__("Invalid request")

    def to_body(self) -> dict:
        return {"detail": self.detail, "errors": self.errors}


class NotFoundError(AppError):
    status_code = 404


class AuthenticationError(AppError):
    status_code = 401

    def to_body(self) -> dict:
        # Never hint at why a token was rejected
        return {}


class ConflictError(AppError):
    status_code = 400
