"""
Freight Negotiation API

Endpoints:
  GET  /health                    – Health check (no auth)
  GET  /api/loads                 – List loads (origin/destination filter)
  GET  /api/loads/{load_id}       – Single load details
  GET  /api/negotiate             – Next rate to offer a carrier
  POST /api/callsdata             – Record a finished negotiation call
  GET  /api/dashboard             – Call analytics (no auth)

All other /api/* endpoints require header: X-API-Key
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.db.connection import Database
from app.db.repositories.call_repo import CallRepository
from app.db.repositories.load_repo import LoadRepository
from app.db.schema import init_db
from app.db.seed import seed_loads
from app.errors import register_error_handlers
from app.routes import health, loads, negotiate, calls, dashboard
from app.routes.frontend import SPAStaticFiles

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s: Settings = app.state.settings
    init_db(app.state.db)
    if s.seed_on_startup:
        seed_loads(app.state.db)
    log.info("%s ready", s.app_name)
    log.info("   Database : %s", s.database_path)
    log.info("   Frontend : %s", s.frontend_dist or "not served")
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Freight Negotiation API",
        description="Load lookup, carrier rate negotiation and call analytics.",
        version="1.0.0",
        lifespan=lifespan,
    )

    db = Database(settings.database_path)
    app.state.settings = settings
    app.state.db = db
    app.state.load_store = LoadRepository(db)
    app.state.call_store = CallRepository(db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(loads.router)
    app.include_router(negotiate.router)
    app.include_router(calls.router)
    app.include_router(dashboard.router)

    # Mounted last so the API routes take precedence
    if settings.frontend_dist and settings.frontend_dist.is_dir():
        app.mount(
            "/",
            SPAStaticFiles(directory=settings.frontend_dist, html=True),
            name="frontend",
        )

    return app


app = create_app()
