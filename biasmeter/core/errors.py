"""
Error taxonomy for the BiasMeter API.

Every domain error carries the HTTP status it maps to and a human-readable
message; route handlers turn them into JSON bodies with a `success` or
`error` flag.
"""

from __future__ import annotations

from typing import Any, Dict


class BiasMeterError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationError(BiasMeterError):
    default_message = "Invalid input"


class InvalidEmailError(ValidationError):
    default_message = "Valid email is required"


class WeakPasswordError(ValidationError):
    default_message = "Password must be at least 6 characters"


class DuplicateUserError(BiasMeterError):
    default_message = "User with this email already exists"


class InvalidCredentialsError(BiasMeterError):
    status_code = 401
    default_message = "Invalid email or password"


class AnalysisFailure(BiasMeterError):
    """Raised when an uploaded file cannot be read."""

    suggestion = "Please check if the file is a valid CSV format"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to analyze file: {detail}")

    def to_response(self) -> Dict[str, Any]:
        return {"error": True, "message": self.message, "suggestion": self.suggestion}
