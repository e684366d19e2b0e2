from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from asset_server.api.health import router as health_router
from asset_server.api.metrics import router as metrics_router
from asset_server.api.static import router as static_router
from asset_server.config import get_settings
from asset_server.observability.logging import configure_logging
from asset_server.observability.middleware import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    # The configured port; uvicorn's own "Uvicorn running on" line reports the bound socket.
    base_url = f"http://localhost:{settings.port}"
    structlog.get_logger("server").info(
        "server_starting",
        address=f"{settings.host}:{settings.port}",
        health_url=f"{base_url}/health",
        metrics_url=f"{base_url}/metrics" if settings.enable_metrics_endpoint else None,
        build_dir=str(settings.build_path),
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Asset Server",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.add_middleware(RequestContextMiddleware)

    # Order matters: the static router's catch-all must come last.
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(static_router)

    return app


app = create_app()
