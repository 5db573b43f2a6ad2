"""Application factory and top-level wiring for the Computadoras API.

``create_app`` brings together configuration, the database engine and its
connection pool, middleware, routers and error handling. It takes the settings
object explicitly so tests (and alternative deployments) can build isolated
apps; ``computadoras.main`` builds the one served in production.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import AppSettings, get_settings
from .core.errors import register_exception_handlers
from .db.migrate import run_migrations
from .db.session import build_engine, build_session_factory
from .middlewares import RequestIdMiddleware
from .routers import api_computadoras as api_computadoras_router
from .routers import meta as meta_router


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or get_settings()

    servers = [{"url": settings.PUBLIC_URL}] if settings.PUBLIC_URL else None
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=meta_router.DESCRIPTION,
        servers=servers,
        docs_url="/api-docs",
        openapi_url="/api-docs-json",
        redoc_url=None,
    )

    # ---------- State ----------
    # The engine owns the connection pool; each request borrows a session
    # from ``session_factory`` through ``db.session.get_db``.
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.docs_definition = meta_router.docs_definition(settings, app.openapi_version)

    if settings.AUTO_MIGRATE:
        run_migrations(engine)

    # ---------- Middleware ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    # ---------- Routers ----------
    app.include_router(meta_router.router)
    app.include_router(api_computadoras_router.router)

    # ---------- Exception handling ----------
    register_exception_handlers(app)

    return app


__all__ = ["create_app"]
