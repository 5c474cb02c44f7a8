"""Session REST API: read-only view of the caller's game for polling clients."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.dependencies import GameServices, get_services
from app.models import GuessEntry, SessionReadResponse
from services.session_token import read_session_token

router = APIRouter(tags=["sessions"])
logger = logging.getLogger(__name__)


@router.get(
    "/session",
    response_model=SessionReadResponse,
    status_code=200,
)
def get_session(request: Request, services: GameServices = Depends(get_services)) -> SessionReadResponse:
    """Return the session named by the cookie. Never creates one and never reveals the secret word."""
    token = request.cookies.get(services.settings.session_cookie_name)
    session_id = read_session_token(token, services.settings.session_secret)
    session = services.store.get(session_id) if session_id else None
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    logger.info("[sessions] GET /api/session session_id=%s guesses=%d", session.id, len(session.history))
    show_hint = "hint" in request.query_params
    return SessionReadResponse(
        session_id=session.id,
        status=session.status,
        guess_count=len(session.history),
        category=session.secret.category if show_hint and session.secret else None,
        history=[GuessEntry(guess=r.guess, score=r.score) for r in session.history],
    )
