import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from yquotes import __version__
from yquotes.config import settings as app_settings
from yquotes.routers import metrics, price

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"yquotes {__version__} ready, upstream={app_settings.upstream_url} "
        f"timeout={app_settings.upstream_timeout}s fail_on_fetch_error={app_settings.fail_on_fetch_error}"
    )
    yield


app = FastAPI(
    title="yquotes",
    summary="Prometheus exporter for live Yahoo Finance quotes.",
    description=(
        "Every scrape of `/price` fetches fresh quotes for the requested symbols and "
        "reports a session-aware price: during pre- and post-market the extended-hours "
        "price is used once that session has traded, otherwise the regular-session price.\n\n"
        "**Key concepts:**\n"
        "- Nothing is cached or polled between scrapes; each request triggers exactly one "
        "upstream call.\n"
        "- `/price` renders from a per-request registry, so symbols requested by one scraper "
        "never leak into another scraper's output.\n"
        "- `/metrics` exposes the exporter's own counters and fetch-duration summary.\n"
    ),
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "price",
            "description": "On-demand quote scraping. Repeat `sym` for each ticker symbol.",
        },
        {
            "name": "system",
            "description": "Health checks and exporter self-metrics.",
        },
    ],
)

app.include_router(price.router)
app.include_router(metrics.router)


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}
