"""
Bible Browser

FastAPI front-end that renders bible-api.com books, chapters and verses
as plain HTML pages.
"""

import time
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables (upstream URL, translations, port)
load_dotenv()

from bible_browser.utils.logger import setup_logging, get_logger
from bible_browser.config import get_settings
from bible_browser.client.bible_api_client import close_bible_client
from bible_browser.controller.bible_controller import router as bible_router

# Initialize structured logging
settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)
logger.info(
    f"Settings loaded (upstream={settings.bible_api_base_url})",
    extra={"event": "settings_loaded"},
)

# Track startup time for uptime calculation
_startup_time = time.time()
_app_version = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    # --- Startup ---
    logger.info(
        f"Starting Bible Browser v{_app_version}",
        extra={"event": "startup"},
    )

    yield

    # --- Shutdown ---
    logger.info("server closed", extra={"event": "shutdown"})
    close_bible_client()


app = FastAPI(
    title="Bible Browser",
    description="HTML pages for browsing books, chapters and verses from bible-api.com.",
    version=_app_version,
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    """HTTP errors are plain text, never JSON."""
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Liveness check with uptime and version.
    Does not call the upstream API.
    """
    from datetime import datetime, timezone

    uptime_seconds = int(time.time() - _startup_time)

    return {
        "status": "healthy",
        "version": _app_version,
        "uptime_seconds": uptime_seconds,
        "upstream": get_settings().bible_api_base_url,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Registered after /health so "/{book}" does not shadow it
app.include_router(bible_router)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
