# calsun/main.py
from fastapi import FastAPI
from fastapi.responses import FileResponse
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from calsun.core.config import settings
from calsun.core.logging_config import setup_logging
from calsun.api.v1.api import api_router
from calsun.api.v1.endpoints import calendar_feed

logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"{settings.PROJECT_NAME} started.")
    yield
    logger.info(f"{settings.PROJECT_NAME} stopped.")

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

@app.get("/", include_in_schema=False)
async def read_index():
    return FileResponse(FRONTEND_DIR / "index.html")

app.include_router(calendar_feed.router, tags=["Calendar"])
app.include_router(api_router, prefix=settings.API_V1_STR)
