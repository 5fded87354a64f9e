"""
pipeup-setup: create a test user on the backend and print an API token for the pipeup CLI.
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Optional, Sequence, TextIO

from pydantic import ValidationError

from pipeup_setup.config import Settings, get_settings
from pipeup_setup.core.errors import BackendUnavailableError, BootstrapError, MissingTokenError
from pipeup_setup.core.logging import get_logger
from pipeup_setup.services.bootstrap import bootstrap_api_token
from pipeup_setup.services.token_export import export_to_environ, shell_export_line, write_env_file

CLI_HINT = "echo 'Hello, Pipeup!' | ./target/debug/pipeup --name 'Test Stream'"

# Human-readable failure line per step, as printed before the raw response.
FAILURE_MESSAGES = {
    "login": "❌ Failed to get JWT token",
    "create_api_token": "❌ Failed to get API token",
}
RESPONSE_LABELS = {
    "login": "Login response",
    "create_api_token": "API token response",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipeup-setup",
        description="Register a test user, log in and mint an API token for the pipeup CLI.",
    )
    parser.add_argument("--api-url", help="Backend base URL (env: API_URL)")
    parser.add_argument("--email", help="Test user email (env: TEST_EMAIL)")
    parser.add_argument("--username", help="Test user name (env: TEST_USERNAME)")
    parser.add_argument("--password", help="Test user password (env: TEST_PASSWORD)")
    parser.add_argument("--token-name", help="Name of the API token to create (env: API_TOKEN_NAME)")
    parser.add_argument("--env-file", help="Also write the token into this dotenv file")
    parser.add_argument("--log-level", help="JSON log level on stderr (env: LOG_LEVEL)")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help='Print only the export line, for eval "$(pipeup-setup --quiet)"',
    )
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Apply CLI flags on top of env/.env settings; overrides are validated like env values."""
    base = base or get_settings()
    overrides: dict[str, Any] = {
        "api_url": args.api_url,
        "test_email": args.email,
        "test_username": args.username,
        "test_password": args.password,
        "api_token_name": args.token_name,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return base
    return Settings(**{**base.model_dump(), **overrides})


def _init_sentry(settings: Settings) -> None:
    if settings.sentry_dsn:
        import sentry_sdk

        sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.app_env)


def _report_failure(error: BootstrapError, out: TextIO) -> None:
    if isinstance(error, MissingTokenError):
        print(FAILURE_MESSAGES.get(error.step, f"❌ {error}"), file=out)
        print(f"{RESPONSE_LABELS.get(error.step, 'Response')}: {error.raw_response}", file=out)
    elif isinstance(error, BackendUnavailableError):
        print(f"❌ Backend unreachable during {error.step}: {error.url}", file=out)
        print(f"Reason: {error.reason}", file=out)
    else:
        print(f"❌ {error}", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # With --quiet stdout is eval'd by the caller: only the export line may go there.
    out = sys.stderr if args.quiet else sys.stdout
    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        print(f"❌ Invalid settings: {e}", file=out)
        return 1
    logger = get_logger("pipeup_setup", settings.log_level)
    _init_sentry(settings)

    def echo(message: str) -> None:
        if not args.quiet:
            print(message, file=out)

    echo("🚀 Setting up CLI integration test environment...")
    try:
        result = asyncio.run(bootstrap_api_token(settings, echo=echo))
    except BootstrapError as e:
        logger.error("bootstrap_failed", extra={"step": e.step})
        _report_failure(e, out)
        return 1

    token = result.api_token
    export_line = shell_export_line(settings.token_env_var, token)
    export_to_environ(settings.token_env_var, token)
    if args.env_file:
        try:
            path = write_env_file(args.env_file, settings.token_env_var, token)
        except OSError as e:
            logger.error("env_file_failed", extra={"step": "export"})
            print(f"❌ Could not write {settings.token_env_var} to {args.env_file}: {e}", file=out)
            print(export_line)
            return 1
        echo(f"📝 Wrote {settings.token_env_var} to {path}")

    if args.quiet:
        print(export_line)
        return 0

    print(f"✅ API token created: {token}")
    print("")
    print("🎉 Setup complete! Use this command to set the environment variable:")
    print(export_line)
    print("")
    print("💡 Test the CLI with:")
    print(CLI_HINT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
