from .errors import GameError, InvalidInput, ServiceError, UnsupportedContentType, UnsupportedMethod
from .store import SessionStore

__all__ = [
    "SessionStore",
    "GameError",
    "InvalidInput",
    "ServiceError",
    "UnsupportedContentType",
    "UnsupportedMethod",
]
