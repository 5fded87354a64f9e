"""
Backend auth integration: register, login, mint API token.
Every call returns the raw response alongside a best-effort JSON parse; callers decide what is fatal.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from pipeup_setup.core.errors import BackendUnavailableError, MissingTokenError
from pipeup_setup.schemas.auth import (
    ApiResponse,
    ApiTokenCreate,
    ApiTokenResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)

logger = logging.getLogger(__name__)

REGISTER_PATH = "/auth/register"
LOGIN_PATH = "/auth/login"
API_TOKENS_PATH = "/auth/api-tokens"


def _parse_body(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


async def _post_json(
    client: httpx.AsyncClient,
    step: str,
    path: str,
    payload: dict[str, Any],
    headers: Optional[dict[str, str]] = None,
) -> ApiResponse:
    try:
        resp = await client.post(path, json=payload, headers=headers)
    except httpx.HTTPError as e:
        url = str(client.base_url.join(path))
        logger.error(f"{step}_request_failed", extra={"step": step, "response": {"url": url, "error": str(e)}})
        raise BackendUnavailableError(step, url, str(e) or type(e).__name__) from e
    result = ApiResponse(status_code=resp.status_code, body=_parse_body(resp), text=resp.text)
    logger.info(
        f"{step}_response",
        extra={"step": step, "status_code": result.status_code, "response": result.body},
    )
    return result


async def register_user(client: httpx.AsyncClient, payload: RegisterRequest) -> ApiResponse:
    """
    POST /auth/register with {"email", "username", "password"}.
    Any status is returned as-is; an existing user is not an error here.
    """
    result = await _post_json(client, "register", REGISTER_PATH, payload.model_dump(mode="json"))
    if not result.ok:
        logger.warning(
            "register_not_accepted",
            extra={"step": "register", "status_code": result.status_code, "response": result.body},
        )
    return result


async def login(client: httpx.AsyncClient, payload: LoginRequest) -> ApiResponse:
    """POST /auth/login with {"email", "password"}."""
    return await _post_json(client, "login", LOGIN_PATH, payload.model_dump(mode="json"))


async def create_api_token(client: httpx.AsyncClient, access_token: str, payload: ApiTokenCreate) -> ApiResponse:
    """POST /auth/api-tokens with {"name"}, authorized by the session bearer token."""
    return await _post_json(
        client,
        "create_api_token",
        API_TOKENS_PATH,
        payload.model_dump(mode="json"),
        headers={"Authorization": f"Bearer {access_token}"},
    )


def extract_access_token(result: ApiResponse) -> str:
    """Session token from a login response; MissingTokenError when absent or empty."""
    try:
        return TokenResponse.model_validate(result.body).access_token
    except ValidationError:
        raise MissingTokenError("login", "access_token", result.text) from None


def extract_raw_token(result: ApiResponse) -> str:
    try:
        return ApiTokenResponse.model_validate(result.body).raw_token
    except ValidationError:
        raise MissingTokenError("create_api_token", "raw_token", result.text) from None
