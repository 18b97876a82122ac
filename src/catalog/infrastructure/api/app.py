"""FastAPI application factory for the category API."""

from __future__ import annotations

import logging
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.config import Settings
from catalog.infrastructure.api.envelope import failure
from catalog.infrastructure.api.router import router
from catalog.infrastructure.bootstrap import Repositories, repositories

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repos: Repositories | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Build the app around explicit repositories.

    Without ``repos`` the JSON store under ``settings.data_dir`` is used.
    """
    app = FastAPI(
        title="Course Catalog",
        description="Category management and category landing pages.",
        version="1.0.0",
    )
    app.state.repositories = repos or repositories(settings)
    app.state.rng = rng

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError):
        # Unparseable bodies still get the envelope
        logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
        envelope = failure(exc)
        return JSONResponse(status_code=envelope.status_code, content=envelope.body)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(router)
    return app
