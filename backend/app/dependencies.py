"""Per-application game components, built once at startup and injected into routes."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from fastapi import Request

from app.config import Settings
from services.guesses import GuessProcessor
from services.similarity import SimilarityClient
from services.store import SecretWordProvider, SessionStore
from services.word_source import WordSource


@dataclass
class GameServices:
    settings: Settings
    store: SessionStore
    word_source: SecretWordProvider
    processor: GuessProcessor


def build_services(settings: Settings, http_client: httpx.AsyncClient) -> GameServices:
    return GameServices(
        settings=settings,
        store=SessionStore(
            ttl_seconds=settings.session_ttl_seconds,
            max_sessions=settings.max_sessions,
        ),
        word_source=WordSource(http_client, settings.word_source_url),
        processor=GuessProcessor(
            SimilarityClient(
                http_client,
                settings.similarity_url,
                score_field=settings.similarity_score_field,
            )
        ),
    )


def get_services(request: Request) -> GameServices:
    return request.app.state.services
