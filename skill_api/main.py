# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from skill_api.api.errors import register_exception_handlers
from skill_api.api.routes.health import router as health_router
from skill_api.api.routes.skills import ROUTE_ERRORS
from skill_api.api.routes.skills import router as skills_router
from skill_api.config import build_sqlalchemy_db_url, settings
from skill_api.database import Base, check_connection, engine
from skill_api.models import Skill  # noqa: F401  # registers the skill table on Base.metadata


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A dead database is logged, not fatal; requests fail with their route's error until it is back.
        if await run_in_threadpool(check_connection):
            logger.info("Connect database success")
        yield
        logger.info("Shutting down...")
        engine.dispose()

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application, ROUTE_ERRORS)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)
    application.include_router(skills_router, prefix=settings.api_prefix)

    # Shared databases get the table from `skill-api create-table`.
    # For local/test sqlite usage, auto-create is still convenient.
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
