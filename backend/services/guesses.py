"""Guess validation, scoring and history bookkeeping."""

from __future__ import annotations

import logging
from typing import Protocol

from models import GameSession, GuessRecord
from services.errors import InvalidInput

logger = logging.getLogger(__name__)

EMPTY_GUESS_MESSAGE = "Please enter a valid word"


class SimilarityScorer(Protocol):
    async def similarity(self, word1: str, word2: str) -> float: ...


def parse_guess(raw: str | None) -> str:
    guess = (raw or "").strip()
    if not guess:
        raise InvalidInput(EMPTY_GUESS_MESSAGE)
    return guess


class GuessProcessor:
    def __init__(self, scorer: SimilarityScorer) -> None:
        self._scorer = scorer

    async def submit(self, session: GameSession, raw_guess: str | None) -> GuessRecord:
        """
        Score a guess against the session's secret word and record it.

        History is only touched after the scorer succeeds; it is then re-sorted
        so the best guess comes first (ties keep their insertion order).
        """
        guess = parse_guess(raw_guess)
        if session.secret is None:
            raise RuntimeError(f"Session {session.id} has no secret word")

        score = await self._scorer.similarity(guess, session.secret.name)
        record = GuessRecord(guess=guess, score=score)
        session.history.append(record)
        session.history.sort(key=lambda r: r.score, reverse=True)

        logger.info(
            "[guesses] session=%s guess=%r score=%.4f (history=%d)",
            session.id,
            guess,
            score,
            len(session.history),
        )
        logger.debug("[guesses] session=%s secret=%r", session.id, session.secret.name)
        return record
