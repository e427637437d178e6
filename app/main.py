# app/main.py
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging
from app.db.base import init_models
from app.db.session import close_engines

settings = get_settings()
setup_logging(settings.LOG_LEVEL, json=settings.JSON_LOG)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_models()
    logger.info("WMS-TMS started (env=%s)", settings.ENV)
    yield
    await close_engines()


app = FastAPI(
    title="WMS-TMS",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

register_exception_handlers(app)
app.include_router(api_router)
