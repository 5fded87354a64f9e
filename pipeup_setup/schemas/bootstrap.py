from __future__ import annotations

from pydantic import BaseModel


class BootstrapResult(BaseModel):
    api_token: str
    register_status: int
