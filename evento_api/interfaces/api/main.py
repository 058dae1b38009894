# evento_api/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from evento_api.infrastructure.config import get_settings
from evento_api.infrastructure.logging_config import configure_logging
from evento_api.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from evento_api.interfaces.api.routes.cadastro_routes import router as cadastro_router
from evento_api.interfaces.api.routes.documento_routes import router as documento_router
from evento_api.interfaces.api.routes.health_routes import router as health_router
from evento_api.interfaces.api.routes.pix_routes import router as pix_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger.info(
        "Evento+ API iniciada (rate_limit=%s/min, debug=%s)",
        settings.rate_limit_per_minute,
        settings.debug,
    )
    yield


app = FastAPI(
    title="Evento+ API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: RequestResponseEndpoint) -> Response:
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api")
app.include_router(documento_router, prefix="/api")
app.include_router(cadastro_router, prefix="/api")
app.include_router(pix_router, prefix="/api")
