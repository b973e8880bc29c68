from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from casedesk.api.router import api_router
from casedesk.core.config import settings
from casedesk.db.init_db import ensure_schema
from casedesk.db.session import engine

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title=settings.app_name)

    origins = settings.cors_origins or ["http://localhost:3000"]
    logger.info("CORS allow_origins=%s", origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "renderer_configured": bool(settings.renderer_webhook_url)}

    @app.on_event("startup")
    def _startup() -> None:
        """
        Local-dev helper: allow running without Postgres by using SQLite.
        Creates tables (without Alembic) when DATABASE_URL points at sqlite.
        """
        if settings.environment == "development" and settings.database_url.startswith("sqlite"):
            ensure_schema(engine)

    app.include_router(api_router)
    return app


app = create_app()
