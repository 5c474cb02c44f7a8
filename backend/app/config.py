"""Runtime settings read from the environment (and a backend/.env file if present)."""

from __future__ import annotations

import logging
import os
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from services.http_client import DEFAULT_TIMEOUT_SECONDS
from services.similarity import DEFAULT_SCORE_FIELD, DEFAULT_SIMILARITY_URL
from services.store import DEFAULT_MAX_SESSIONS, DEFAULT_SESSION_TTL_SECONDS
from services.word_source import DEFAULT_WORD_SOURCE_URL

logger = logging.getLogger(__name__)

BACKEND_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseModel):
    word_source_url: str = Field(default=DEFAULT_WORD_SOURCE_URL)
    similarity_url: str = Field(default=DEFAULT_SIMILARITY_URL)
    similarity_score_field: str = Field(default=DEFAULT_SCORE_FIELD)
    request_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    session_secret: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    session_cookie_name: str = Field(default="session")
    session_ttl_seconds: int = Field(default=DEFAULT_SESSION_TTL_SECONDS, gt=0)
    max_sessions: int = Field(default=DEFAULT_MAX_SESSIONS, ge=1)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, *, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(BACKEND_ROOT / ".env")

        values: dict[str, object] = {}
        for name in ("word_source_url", "similarity_url", "similarity_score_field", "session_cookie_name", "host"):
            raw = _env(name)
            if raw:
                values[name] = raw
        for name, convert in (
            ("request_timeout_seconds", float),
            ("session_ttl_seconds", int),
            ("max_sessions", int),
            ("port", int),
        ):
            raw = _env(name)
            if raw:
                try:
                    values[name] = convert(raw)
                except ValueError as exc:
                    raise ValueError(f"{name.upper()} must be a number, got {raw!r}") from exc

        session_secret = _env("session_secret")
        if session_secret:
            values["session_secret"] = session_secret
        else:
            logger.warning(
                "SESSION_SECRET not set; using a random per-process secret (sessions reset on restart)."
            )
        log_level = _env("log_level")
        if log_level:
            values["log_level"] = log_level.upper()
        return cls(**values)


def _env(name: str) -> str:
    return os.environ.get(name.upper(), "").strip()
