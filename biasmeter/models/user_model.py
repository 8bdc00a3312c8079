"""User-facing auth models."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, field_validator


class Profile(BaseModel):
    email: str
    name: str
    role: Literal["user", "admin"] = "user"
    company: str


class _AuthBody(BaseModel):
    # Missing keys surface as domain errors (400/401), not framework 422s
    @field_validator("*", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        # JSON numbers and booleans bind as their text form
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class RegisterRequest(_AuthBody):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None


class LoginRequest(_AuthBody):
    email: Optional[str] = None
    password: Optional[str] = None
