"""
Test-environment bootstrap: register -> login -> mint API token, strictly in that order.
Registration outcome is informational; only a missing token aborts the run.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from pipeup_setup.config import Settings
from pipeup_setup.schemas.auth import ApiTokenCreate, LoginRequest, RegisterRequest
from pipeup_setup.schemas.bootstrap import BootstrapResult
from pipeup_setup.services.auth_client import (
    create_api_token,
    extract_access_token,
    extract_raw_token,
    login,
    register_user,
)

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def _silent(_: str) -> None:
    pass


def build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.api_url,
        timeout=settings.request_timeout,
        headers={"Content-Type": "application/json"},
    )


async def bootstrap_api_token(
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
    echo: Echo = _silent,
) -> BootstrapResult:
    """
    Run the three auth calls against settings.api_url and return the raw API token.
    Raises MissingTokenError / BackendUnavailableError; the caller owns exit codes.
    """
    if client is None:
        async with build_client(settings) as owned:
            return await _run(settings, owned, echo)
    return await _run(settings, client, echo)


async def _run(settings: Settings, client: httpx.AsyncClient, echo: Echo) -> BootstrapResult:
    echo(f"📧 Creating test user: {settings.test_email}")
    registered = await register_user(
        client,
        RegisterRequest(
            email=settings.test_email,
            username=settings.test_username,
            password=settings.test_password,
        ),
    )
    echo(f"Register response: {registered.text}")

    echo("🔐 Logging in to get JWT token...")
    logged_in = await login(client, LoginRequest(email=settings.test_email, password=settings.test_password))
    echo(f"Login response: {logged_in.text}")
    access_token = extract_access_token(logged_in)
    echo("✅ JWT token obtained")

    echo("🔑 Creating API token for CLI...")
    minted = await create_api_token(client, access_token, ApiTokenCreate(name=settings.api_token_name))
    echo(f"API token response: {minted.text}")
    api_token = extract_raw_token(minted)

    logger.info("api_token_created", extra={"step": "create_api_token", "status_code": minted.status_code})
    return BootstrapResult(api_token=api_token, register_status=registered.status_code)
