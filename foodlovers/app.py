from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import DEFAULT_CONFIG, AppConfig
from .errors import register_exception_handlers
from .favorites.router import router as favorites_router
from .middleware import SecurityHeadersMiddleware
from .reviews.router import router as reviews_router
from .storage.client import Storage, close_storage, connect_storage, get_storage, ping_storage

logger = logging.getLogger(__name__)


def create_app(config: AppConfig = DEFAULT_CONFIG) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Storage must be ready before the server accepts traffic;
        # a failure here aborts startup.
        app.state.storage = await connect_storage(config)
        try:
            yield
        finally:
            await close_storage(app.state.storage)

    app = FastAPI(title="Food Lovers Reviews API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(reviews_router)
    app.include_router(favorites_router)

    # ── Liveness / readiness ─────────────────────────────────────────────

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "API running..."

    @app.get("/health")
    async def health(storage: Storage = Depends(get_storage)) -> JSONResponse:
        if await ping_storage(storage):
            return JSONResponse({"status": "ok"})
        return JSONResponse({"status": "unavailable"}, status_code=503)

    return app


app = create_app()
