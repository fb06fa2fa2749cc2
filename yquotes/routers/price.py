"""On-demand quote scrape endpoint (`/price`)."""

import logging

from fastapi import APIRouter, HTTPException, Query, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from yquotes.config import settings
from yquotes.services.collector import QuoteCollector
from yquotes.services.yahoo import QuoteFetchError
from yquotes.utils import async_threadable

logger = logging.getLogger(__name__)

router = APIRouter(tags=["price"])

_render = async_threadable(generate_latest)


@router.get(
    "/price",
    summary="Scrape live quotes for the requested symbols",
    response_class=Response,
    responses={
        200: {"content": {CONTENT_TYPE_LATEST: {}}, "description": "Prometheus exposition snapshot."},
        400: {"description": "No `sym` parameter given."},
        502: {"description": "Upstream fetch failed and `fail_on_fetch_error` is enabled."},
    },
)
async def get_price(
    sym: list[str] | None = Query(None, description="Ticker symbol; repeat for several (e.g. `?sym=AAPL&sym=MSFT`)"),
):
    """Fetch fresh quotes from Yahoo Finance and render them as gauges.

    Every call hits the upstream API; nothing is cached between scrapes.
    The registry and collector live only for this request, so label sets
    from one scrape never show up in another.

    Per symbol Yahoo knows about:
    - `yquotes_last_price_dollars{symbol,name,active}`
    - `yquotes_opening_price_dollars{symbol,name,active}`
    - `yquotes_previous_close_price_dollars{symbol,name,active}`
    """
    if not sym:
        logger.info("no syms given")
        raise HTTPException(400, "At least one 'sym' query parameter is required")

    registry = CollectorRegistry()
    registry.register(QuoteCollector(sym, fail_on_error=settings.fail_on_fetch_error))

    try:
        body = await _render(registry)
    except QuoteFetchError as exc:
        raise HTTPException(502, f"Upstream quote fetch failed: {exc.reason}")

    return Response(content=body, media_type=CONTENT_TYPE_LATEST)
