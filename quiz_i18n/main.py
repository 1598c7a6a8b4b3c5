from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from quiz_i18n.core.config import settings
from quiz_i18n.core.logging_config import setup_logging
from quiz_i18n.routers import multilingual

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.ENVIRONMENT, settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info(f"🚀 Starting {settings.APP_NAME}...")

    yield
    # Shutdown
    logger.info(f"🛑 Shutting down {settings.APP_NAME}...")

app = FastAPI(
    title=settings.APP_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan
)

app.include_router(multilingual.router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": "0.1.0"}
