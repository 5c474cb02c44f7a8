from pydantic import BaseModel

from models import SessionStatus


class GuessEntry(BaseModel):
    guess: str
    score: float


class GuessResponse(BaseModel):
    guess: str
    score: float
    band: str
    message: str
    bar_width: float
    category: str | None = None
    history: list[GuessEntry]


class SessionReadResponse(BaseModel):
    session_id: str
    status: SessionStatus
    guess_count: int
    category: str | None = None
    history: list[GuessEntry]
