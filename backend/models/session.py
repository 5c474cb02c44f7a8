from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from .guess import GuessRecord, SecretWord


class SessionStatus(str, Enum):
    NEW = "new"
    ACTIVE = "active"


@dataclass
class GameSession:
    id: str                                # opaque, carried in the signed cookie
    secret: SecretWord | None = None
    status: SessionStatus = SessionStatus.NEW
    history: list[GuessRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_seen_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def assign_secret(self, secret: SecretWord) -> None:
        """Set the secret word once; a session keeps it for its whole lifetime."""
        if self.secret is not None:
            raise ValueError(f"Session {self.id} already has a secret word")
        self.secret = secret
        self.status = SessionStatus.ACTIVE

    @property
    def best_guess(self) -> GuessRecord | None:
        return self.history[0] if self.history else None
