"""
Hand the minted API token to the pipeup CLI: process env, shell export line, optional dotenv file.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

from dotenv import set_key

logger = logging.getLogger(__name__)


def export_to_environ(name: str, token: str, environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Visible to this process and its children only; a parent shell needs shell_export_line()."""
    target = os.environ if environ is None else environ
    target[name] = token


def shell_export_line(name: str, token: str) -> str:
    escaped = token.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$").replace("`", "\\`")
    return f'export {name}="{escaped}"'


def write_env_file(path: str | Path, name: str, token: str) -> Path:
    """Set name=token in a dotenv file, creating it if needed and keeping other keys."""
    env_path = Path(path)
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    set_key(str(env_path), name, token, quote_mode="never")
    logger.info("env_file_written", extra={"step": "export", "response": {"path": str(env_path), "variable": name}})
    return env_path
