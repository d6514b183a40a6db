"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorie_tracker.api.auth import router as auth_router
from calorie_tracker.api.dashboard import router as dashboard_router
from calorie_tracker.api.records import router as records_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Tracker")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(records_router)
    app.include_router(dashboard_router)

    @app.exception_handler(RuntimeError)
    async def storage_error(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.exception(
            "Request failed", extra={"path": request.url.path}, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
