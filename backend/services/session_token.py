"""Signed session cookie tokens (JWT) carrying the session id."""

import logging
import secrets
import time

import jwt

logger = logging.getLogger(__name__)

# URL/cookie-safe, no lookalike characters.
_SESSION_ALPHABET = "23456789abcdefghjkmnpqrstuvwxyz"
_SESSION_ID_LENGTH = 16
_ALGORITHM = "HS256"


def generate_session_id() -> str:
    return "".join(secrets.choice(_SESSION_ALPHABET) for _ in range(_SESSION_ID_LENGTH))


def create_session_token(
    session_id: str,
    secret: str,
    expiration_seconds: int = 86400,
) -> str:
    """Create a signed token for the given session id.
    iat is backdated 60s so small clock skew between workers does not reject it.
    """
    now = int(time.time())
    payload = {
        "sid": session_id,
        "iat": now - 60,
        "exp": now + expiration_seconds,
    }
    return jwt.encode(
        payload,
        secret,
        algorithm=_ALGORITHM,
    )


def read_session_token(token: str | None, secret: str) -> str | None:
    """Return the session id inside a valid token, or None if the token is unusable."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("[session_token] Expired session token; starting a new session.")
        return None
    except jwt.InvalidTokenError as exc:
        logger.warning("[session_token] Rejected session token: %s", exc)
        return None
    session_id = payload.get("sid")
    if not isinstance(session_id, str) or not session_id:
        logger.warning("[session_token] Session token has no sid claim.")
        return None
    return session_id
