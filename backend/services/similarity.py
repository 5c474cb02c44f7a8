"""Client for the word-embedding similarity service."""

from __future__ import annotations

import logging
import math

import httpx

from services.errors import ServiceError
from services.http_client import request_json

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_URL = "http://word2vec.nicolasfley.fr/similarity"
DEFAULT_SCORE_FIELD = "result"
SERVICE_NAME = "Word2Vec API"


class SimilarityClient:
    """POST {"word1": ..., "word2": ...} and read the numeric score field of the reply."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = DEFAULT_SIMILARITY_URL,
        *,
        score_field: str = DEFAULT_SCORE_FIELD,
    ) -> None:
        self._client = client
        self._url = url
        self._score_field = score_field

    async def similarity(self, word1: str, word2: str) -> float:
        data = await request_json(
            self._client,
            "POST",
            self._url,
            service=SERVICE_NAME,
            json={"word1": word1, "word2": word2},
        )
        score = data.get(self._score_field) if isinstance(data, dict) else None
        # bool is an int subclass; a true/false reply is not a score.
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
            logger.error("[similarity] Missing numeric %r in reply: %.200r", self._score_field, data)
            raise ServiceError(f"Unexpected response format from {SERVICE_NAME}")
        return float(score)
