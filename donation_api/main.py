# donation_api/main.py
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from donation_api.core.config import Settings, load_settings
from donation_api.core.errors import AuthError, StoreError, auth_error_handler
from donation_api.core.logging import configure_logging, get_logger
from donation_api.core.sessions import SessionRegistry
from donation_api.db import close_client
from donation_api.deps import build_repo
from donation_api.middleware.request_log import RequestLogMiddleware
from donation_api.routers import admin as admin_router
from donation_api.routers import donations as donations_router
from donation_api.schemas import StatusOut

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.use_mongo:
            try:
                await app.state.repo.ping()
                await app.state.repo.ensure_indexes()
                logger.info("mongodb_connected", db=settings.mongo_db)
            except StoreError as exc:
                # keep serving; store calls will fail with 500 until it is reachable
                logger.error("mongodb_connection_error", error=str(exc))
        logger.info("server_started", port=settings.port, use_mongo=settings.use_mongo)

        yield

        sessions = app.state.sessions
        logger.info("server_stopping", dropped_sessions=len(sessions))
        sessions.clear()
        if settings.use_mongo:
            close_client(settings)

    app = FastAPI(lifespan=lifespan, title="Donation API")
    app.state.settings = settings
    app.state.repo = build_repo(settings)
    app.state.sessions = SessionRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(AuthError, auth_error_handler)

    app.include_router(donations_router.router)     # /api/donations
    app.include_router(admin_router.router)         # /api/admin

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir), html=True), name="static")

    @app.get("/", response_model=StatusOut)
    def root():
        return {"status": "live", "message": "Donation API is running"}

    return app


app = create_app()
