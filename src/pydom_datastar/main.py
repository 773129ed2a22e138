"""
Datastar demo server - FastAPI application entry point.

Run with: uvicorn pydom_datastar.main:app --reload
"""

from contextlib import asynccontextmanager

import dotenv
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from loguru import logger

from pydom_datastar.core.config import get_settings
from pydom_datastar.templates.demo import render_demo_page


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    dotenv.load_dotenv()

    settings = get_settings()
    logger.info(f"Datastar demo starting (Datastar {settings.datastar_version})...")

    yield

    logger.info("Datastar demo shutting down...")


app = FastAPI(
    title="Datastar Attributes Demo",
    description="Every Datastar attribute built with pydom-datastar",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    """Render the demo page."""
    return render_demo_page()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
