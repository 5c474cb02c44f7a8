from unittest.mock import patch

import pytest

from app.config import Settings
from services.similarity import DEFAULT_SIMILARITY_URL
from services.word_source import DEFAULT_WORD_SOURCE_URL


def test_defaults_without_environment() -> None:
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings.from_env(load_env_file=False)
    assert settings.word_source_url == DEFAULT_WORD_SOURCE_URL
    assert settings.similarity_url == DEFAULT_SIMILARITY_URL
    assert settings.similarity_score_field == "result"
    assert settings.request_timeout_seconds == 5.0
    assert settings.session_cookie_name == "session"
    assert len(settings.session_secret) >= 32


def test_random_secret_differs_per_settings_instance() -> None:
    with patch.dict("os.environ", {}, clear=True):
        assert Settings.from_env(load_env_file=False).session_secret != Settings.from_env(
            load_env_file=False
        ).session_secret


def test_values_from_environment_are_stripped_and_converted() -> None:
    env = {
        "SIMILARITY_URL": "  http://localhost:9000/similarity  ",
        "SIMILARITY_SCORE_FIELD": "simscore",
        "REQUEST_TIMEOUT_SECONDS": "2.5",
        "SESSION_SECRET": "from-env-secret-0123456789abcdefgh",
        "SESSION_TTL_SECONDS": "120",
        "MAX_SESSIONS": "5",
        "PORT": "9001",
        "LOG_LEVEL": "debug",
    }
    with patch.dict("os.environ", env, clear=True):
        settings = Settings.from_env(load_env_file=False)
    assert settings.similarity_url == "http://localhost:9000/similarity"
    assert settings.similarity_score_field == "simscore"
    assert settings.request_timeout_seconds == 2.5
    assert settings.session_secret == "from-env-secret-0123456789abcdefgh"
    assert settings.session_ttl_seconds == 120
    assert settings.max_sessions == 5
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"


def test_non_numeric_value_names_the_variable() -> None:
    with patch.dict("os.environ", {"MAX_SESSIONS": "lots"}, clear=True):
        with pytest.raises(ValueError, match="MAX_SESSIONS"):
            Settings.from_env(load_env_file=False)
