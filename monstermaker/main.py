"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from monstermaker.api.dex import router as dex_router
from monstermaker.api.health import router as health_router
from monstermaker.config import settings
from monstermaker.core.logging import get_logger, setup_logging
from monstermaker.services.dex_service import build_dex_service

setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    # 도감 초기화
    logger.info("Initializing DexService...")
    dex_service = build_dex_service(settings)
    app.state.dex_service = dex_service
    logger.info(
        f"DexService initialized ({dex_service.types.count()} types, "
        f"bestiary={'on' if settings.BESTIARY_ENABLED else 'off'})."
    )

    yield

    logger.info("Shutting down...")
    app.state.dex_service = None


app = FastAPI(title="Monster Maker", lifespan=lifespan)

app.include_router(health_router)
app.include_router(dex_router)
