from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.dependencies import GameServices, build_services
from routes.game import method_not_allowed_handler
from routes.game import router as game_router
from routes.sessions import router as sessions_router
from services.http_client import create_http_client


def create_app(
    settings: Settings | None = None,
    *,
    services: GameServices | None = None,
) -> FastAPI:
    """
    Build the app. Pass `services` to run against fake collaborators.

    There is no module-level instance; serve with `uvicorn.run(create_app(...))`
    or `uvicorn app.main:create_app --factory`.
    """
    http_client = None
    if services is None:
        settings = settings or Settings.from_env()
        http_client = create_http_client(settings.request_timeout_seconds)
        services = build_services(settings, http_client)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            if http_client is not None:
                await http_client.aclose()

    app = FastAPI(title="Word Guessing Game", version="0.1.0", lifespan=lifespan)
    app.state.services = services
    app.state.http_client = http_client
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(game_router)
    app.include_router(sessions_router, prefix="/api")
    return app
