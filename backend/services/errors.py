"""Error kinds surfaced by the game handler, each with its HTTP status."""


class GameError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(GameError):
    status_code = 400


class UnsupportedMethod(GameError):
    status_code = 405


class UnsupportedContentType(GameError):
    status_code = 415


class ServiceError(GameError):
    """A collaborator (word source or similarity service) failed or misbehaved."""

    status_code = 502
