"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.staticfiles import StaticFiles

from national_connect.api.routes import router
from national_connect.app_logging import configure_logging
from national_connect.config import parse_cors_origins
from national_connect.containers import AppContainer
from national_connect.domain.errors import DirectoryError, ErrorKind

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="National Connect API")
    app.state.container = container

    # Registered before CORS so that CORS wraps it and 500s keep their headers.
    @app.middleware("http")
    async def unexpected_error_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error", extra={"path": request.url.path})
            return JSONResponse(status_code=500, content={"error": str(exc)})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DirectoryError)
    async def directory_error_handler(
        request: Request, exc: DirectoryError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_STATUS_BY_KIND[exc.kind], content={"error": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    app.include_router(router)

    upload_dir = Path(container.settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    return app
