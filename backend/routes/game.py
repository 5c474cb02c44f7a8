"""The game route: one URL, guess via GET query string (HTML) or POST body (JSON)."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.dependencies import GameServices, get_services
from app.models import GuessEntry, GuessResponse
from models import GameSession
from services.errors import GameError, InvalidInput, ServiceError, UnsupportedContentType, UnsupportedMethod
from services.render import render_page
from services.score_presenter import present_score
from services.session_token import create_session_token, generate_session_id, read_session_token

router = APIRouter(tags=["game"])
logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST")
_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def resolve_session_id(request: Request, services: GameServices) -> str:
    """Session id from a valid signed cookie, or a freshly generated one."""
    token = request.cookies.get(services.settings.session_cookie_name)
    session_id = read_session_token(token, services.settings.session_secret)
    if session_id is None:
        session_id = generate_session_id()
        logger.info("[game] No usable session cookie; new session_id=%s", session_id)
    return session_id


def set_session_cookie(response: Response, session_id: str, services: GameServices) -> None:
    settings = services.settings
    response.set_cookie(
        settings.session_cookie_name,
        create_session_token(
            session_id,
            settings.session_secret,
            expiration_seconds=settings.session_ttl_seconds,
        ),
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )


def _log_game_error(session_id: str | None, exc: GameError) -> None:
    if isinstance(exc, ServiceError):
        logger.error("[game] session=%s service failure: %s", session_id, exc.message)
    else:
        logger.warning("[game] session=%s rejected request (%d): %s", session_id, exc.status_code, exc.message)


def _history(session: GameSession) -> list[GuessEntry]:
    return [GuessEntry(guess=r.guess, score=r.score) for r in session.history]


@router.get("/", response_class=HTMLResponse)
async def play(request: Request, services: GameServices = Depends(get_services)) -> HTMLResponse:
    """Play one guess from ?text=...; ?hint reveals the secret word's category."""
    session_id = resolve_session_id(request, services)
    show_hint = "hint" in request.query_params
    raw_guess = request.query_params.get("text")
    guess = (raw_guess or "").strip()

    session: GameSession | None = None
    score: float | None = None
    error: str | None = None
    status_code = 200
    try:
        session = await services.store.get_or_create(session_id, services.word_source)
        # ?hint on its own only redisplays the page with the category.
        if raw_guess is not None or not show_hint:
            record = await services.processor.submit(session, raw_guess)
            score = record.score
    except GameError as exc:
        _log_game_error(session_id, exc)
        error = exc.message
        # Validation problems are part of normal play and render as a regular page.
        status_code = 200 if isinstance(exc, InvalidInput) else exc.status_code

    response = HTMLResponse(
        render_page(
            guess=guess,
            score=score,
            error=error,
            show_hint=show_hint,
            category=session.secret.category if session and session.secret else None,
            history=session.history if session else (),
        ),
        status_code=status_code,
    )
    set_session_cookie(response, session_id, services)
    return response


async def _read_post_fields(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            body = await request.json()
        except ValueError as exc:
            raise InvalidInput("Request body is not valid JSON") from exc
        if not isinstance(body, dict):
            raise InvalidInput("Request body must be a JSON object")
        return body
    if content_type in _FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)
    raise UnsupportedContentType(
        f"Unsupported content type {content_type or '(none)'!r}; send JSON or form data"
    )


@router.post("/", response_model=GuessResponse)
async def play_json(request: Request, services: GameServices = Depends(get_services)) -> Response:
    """Same game as GET, with the guess in a JSON or form body and a JSON reply."""
    session_id = resolve_session_id(request, services)
    try:
        fields = await _read_post_fields(request)
        raw_guess = fields.get("text")
        if raw_guess is not None and not isinstance(raw_guess, str):
            raise InvalidInput("Field 'text' must be a string")
        session = await services.store.get_or_create(session_id, services.word_source)
        record = await services.processor.submit(session, raw_guess)
    except GameError as exc:
        _log_game_error(session_id, exc)
        response: Response = JSONResponse({"detail": exc.message}, status_code=exc.status_code)
        set_session_cookie(response, session_id, services)
        return response

    display = present_score(record.score, record.guess)
    show_hint = "hint" in fields or "hint" in request.query_params
    body = GuessResponse(
        guess=record.guess,
        score=record.score,
        band=display.band.value,
        message=display.message,
        bar_width=display.bar_width,
        category=session.secret.category if show_hint and session.secret else None,
        history=_history(session),
    )
    response = JSONResponse(body.model_dump())
    set_session_cookie(response, session_id, services)
    return response


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Render any method rejected on the game page as the game's error page.

    Sessions are neither read nor created. Other routes and statuses keep
    FastAPI's default handling.
    """
    if exc.status_code != 405 or request.url.path != "/":
        return await http_exception_handler(request, exc)
    error = UnsupportedMethod(f"Method Not Allowed: {request.method}")
    _log_game_error(None, error)
    return HTMLResponse(
        render_page(error=error.message),
        status_code=error.status_code,
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
    )
