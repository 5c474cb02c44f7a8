"""Map a raw similarity score to what the player sees: a bar and a phrase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from models import EXACT_MATCH_TOLERANCE, VERY_CLOSE_THRESHOLD


class ScoreBand(str, Enum):
    EXACT = "exact"
    VERY_CLOSE = "very_close"
    FAR = "far"


@dataclass(frozen=True)
class ScoreDisplay:
    bar_width: float       # percent, 0-100
    band: ScoreBand
    message: str


def bar_width(score: float) -> float:
    """Linear map of [-1, 1] onto [0, 100]; out-of-range scores are clamped."""
    clamped = max(-1.0, min(score, 1.0))
    return round((clamped + 1.0) / 2.0 * 100.0, 1)


def score_band(score: float) -> ScoreBand:
    if score >= 1.0 - EXACT_MATCH_TOLERANCE:
        return ScoreBand.EXACT
    if score > VERY_CLOSE_THRESHOLD:
        return ScoreBand.VERY_CLOSE
    return ScoreBand.FAR


def present_score(score: float, guess: str) -> ScoreDisplay:
    band = score_band(score)
    if band is ScoreBand.EXACT:
        message = f"Well played! The word was {guess}."
    elif band is ScoreBand.VERY_CLOSE:
        message = f"{guess} is very close to the word, score: {score}"
    else:
        message = f"{guess} is quite far from the word, score: {score}"
    return ScoreDisplay(bar_width=bar_width(score), band=band, message=message)
