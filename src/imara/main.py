"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from imara.auth.router import router as auth_router
from imara.challenges.router import router as challenges_router
from imara.checkins.router import router as checkins_router
from imara.community.router import router as community_router
from imara.config import get_settings
from imara.database import close_store, init_store
from imara.gamification.router import router as achievements_router
from imara.habits.router import router as habits_router
from imara.health.router import router as health_router
from imara.journal.router import router as journal_router
from imara.middleware import setup_middleware
from imara.mood.router import router as mood_router
from imara.planner.router import router as planner_router
from imara.stats.router import router as stats_router
from imara.themes.router import router as themes_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    store = await init_store(settings.data_file)
    store.start_autosave(settings.snapshot_interval_seconds)
    logger.info(
        "imara_started",
        data_file=settings.data_file,
        users=len(store.state.users),
        posts=len(store.state.community_posts),
    )

    yield

    # Final snapshot before the process exits
    await close_store()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="IMARA Wellness API",
        description="Backend API for IMARA: check-ins, journaling, habits, moods and community",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(checkins_router)
    app.include_router(journal_router)
    app.include_router(habits_router)
    app.include_router(mood_router)
    app.include_router(community_router)
    app.include_router(achievements_router)
    app.include_router(challenges_router)
    app.include_router(planner_router)
    app.include_router(themes_router)
    app.include_router(stats_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
