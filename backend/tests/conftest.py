from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import GameServices
from app.main import create_app
from services.guesses import GuessProcessor
from services.store import SessionStore
from tests.fakes import FakeScorer, FakeWordSource

TEST_SESSION_SECRET = "test-session-secret-0123456789abcdef"


@pytest.fixture
def settings() -> Settings:
    return Settings(session_secret=TEST_SESSION_SECRET)


@pytest.fixture
def word_source() -> FakeWordSource:
    return FakeWordSource()


@pytest.fixture
def scorer() -> FakeScorer:
    return FakeScorer({"chat": 0.72, "voiture": 0.05, "loup": 0.81})


@pytest.fixture
def services(settings: Settings, word_source: FakeWordSource, scorer: FakeScorer) -> GameServices:
    return GameServices(
        settings=settings,
        store=SessionStore(),
        word_source=word_source,
        processor=GuessProcessor(scorer),
    )


@pytest.fixture
def app(services: GameServices) -> FastAPI:
    return create_app(services=services)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
