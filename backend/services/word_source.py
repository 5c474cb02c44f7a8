"""Client for the random-word provider that supplies each session's secret word."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from models import SecretWord
from services.errors import ServiceError
from services.http_client import request_json

logger = logging.getLogger(__name__)

DEFAULT_WORD_SOURCE_URL = "https://trouve-mot.fr/api/random"
SERVICE_NAME = "Word source"


class WordSource:
    """
    Fetch random words from a provider answering with a one-element JSON array:
      [{"name": "chien", "categorie": "animaux", ...}]
    """

    def __init__(self, client: httpx.AsyncClient, url: str = DEFAULT_WORD_SOURCE_URL) -> None:
        self._client = client
        self._url = url

    async def fetch_random(self) -> SecretWord:
        data = await request_json(self._client, "GET", self._url, service=SERVICE_NAME)
        secret = _parse_word(data)
        logger.info("[word_source] New secret word fetched (category=%s).", secret.category)
        return secret


def _parse_word(data: Any) -> SecretWord:
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise ServiceError(f"Unexpected response format from {SERVICE_NAME}")
    entry = data[0]
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ServiceError(f"Unexpected response format from {SERVICE_NAME}")
    category = entry.get("categorie")
    return SecretWord(
        name=name.strip(),
        category=category.strip() if isinstance(category, str) else "",
    )
