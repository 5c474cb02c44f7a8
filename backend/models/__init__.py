from .guess import EXACT_MATCH_TOLERANCE, VERY_CLOSE_THRESHOLD, GuessRecord, SecretWord
from .session import GameSession, SessionStatus

__all__ = [
    "GameSession",
    "SessionStatus",
    "GuessRecord",
    "SecretWord",
    "EXACT_MATCH_TOLERANCE",
    "VERY_CLOSE_THRESHOLD",
]
