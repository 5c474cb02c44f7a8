from dataclasses import dataclass


@dataclass(frozen=True)
class SecretWord:
    name: str                  # word the player has to find
    category: str              # revealed as a hint on demand


@dataclass(frozen=True)
class GuessRecord:
    guess: str                 # trimmed player input
    score: float               # similarity in [-1, 1]


EXACT_MATCH_TOLERANCE = 1e-6   # embeddings rarely return exactly 1.0
VERY_CLOSE_THRESHOLD = 0.5     # scores above this are "very close"
