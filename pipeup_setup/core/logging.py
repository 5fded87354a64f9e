"""
Structured JSON logging with the bootstrap step when applicable.
Redact credentials in logged backend responses.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any

SECRET_KEYS = ("access_token", "raw_token", "token", "password", "authorization", "secret", "key")


def _redact(obj: Any) -> Any:
    """Redact keys that might contain secrets (e.g. login response)."""
    if isinstance(obj, dict):
        return {k: "***" if str(k).lower() in SECRET_KEYS else _redact(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_redact(x) for x in obj]
    return obj


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S.000Z", time.gmtime(record.created)),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if getattr(record, "step", None):
            log["step"] = record.step
        if getattr(record, "status_code", None) is not None:
            log["status_code"] = record.status_code
        if getattr(record, "response", None) is not None:
            log["response"] = _redact(record.response)
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def get_logger(name: str, level: str | int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
