from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from states_api.api import router as api_router
from states_api.core.config import get_settings
from states_api.core.errors import StatesApiError
from states_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


async def states_api_error_handler(request: Request, exc: StatesApiError) -> JSONResponse:
    """Render domain errors as ``{"message": ...}`` with their status code."""
    logger.debug("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bodies that cannot be decoded get a 400 in the same shape as other errors."""
    logger.debug("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="States API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StatesApiError, states_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(api_router)
    return app


app = create_app()
