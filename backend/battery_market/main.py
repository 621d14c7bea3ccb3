"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from battery_market.api import (
    routes_admin,
    routes_auth,
    routes_batteries,
    routes_health,
    routes_inquiries,
    routes_search,
    routes_users,
)
from battery_market.core.config import Settings, get_settings
from battery_market.core.db import Base, engine_from_settings, make_session_factory
from battery_market.core.errors import register_exception_handlers
from battery_market.core.security import BearerAuthGuard
from battery_market.core.sessions import InMemorySessionStore, SessionStore
from battery_market.models import battery, inquiry, login_event, user  # noqa: F401 - ensure models are registered
from battery_market.repositories.battery_repository import BatteryRepository
from battery_market.repositories.inquiry_repository import InquiryRepository
from battery_market.repositories.user_repository import UserRepository
from battery_market.services.admin_service import AdminService
from battery_market.services.auth_service import AuthService
from battery_market.services.battery_service import BatteryService
from battery_market.services.inquiry_service import InquiryService

LOGGER = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    session_store: Optional[SessionStore] = None,
) -> FastAPI:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if settings is None:
        settings = get_settings()
    app = FastAPI(title="Battery Marketplace", version="0.1.0")

    # Initialize persistence and services
    if engine is None:
        engine = engine_from_settings(settings)
    Base.metadata.create_all(bind=engine)
    session_factory = make_session_factory(engine)
    sessions = session_store
    if sessions is None:
        sessions = InMemorySessionStore(ttl_seconds=settings.session_ttl_seconds())

    user_repo = UserRepository()
    battery_repo = BatteryRepository()
    inquiry_repo = InquiryRepository()

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.user_repository = user_repo
    app.state.auth_guard = BearerAuthGuard(sessions)
    app.state.auth_service = AuthService(user_repo, sessions)
    app.state.battery_service = BatteryService(battery_repo, user_repo)
    app.state.inquiry_service = InquiryService(inquiry_repo, battery_repo)
    app.state.admin_service = AdminService(user_repo, inquiry_repo)

    with session_factory() as db:
        seeded = app.state.auth_service.seed_admin(db, settings.MARKET_ADMIN_USERNAME, settings.MARKET_ADMIN_PASSWORD)
        if seeded:
            LOGGER.info("Seeded bootstrap admin %s", seeded.username)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.MARKET_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(routes_auth.router)
    app.include_router(routes_users.router)
    app.include_router(routes_batteries.router)
    app.include_router(routes_search.router)
    app.include_router(routes_inquiries.router)
    app.include_router(routes_admin.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


app = create_app()
