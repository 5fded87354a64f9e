from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """POST /auth/register."""

    email: str
    username: str
    password: str


class LoginRequest(BaseModel):
    """POST /auth/login."""

    email: str
    password: str


class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(min_length=1)
    token_type: str = "bearer"


class ApiTokenCreate(BaseModel):
    """POST /auth/api-tokens (Authorization: Bearer <access_token>)."""

    name: str


class ApiTokenResponse(BaseModel):
    # Backend also returns id, name, created_at; only the raw value is shown once.
    model_config = ConfigDict(extra="ignore")

    raw_token: str = Field(min_length=1)


class ApiResponse(BaseModel):
    """Status, best-effort parsed JSON object and raw text of one backend call."""

    status_code: int
    body: dict[str, Any] = Field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
