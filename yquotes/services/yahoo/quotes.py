"""Yahoo Finance real-time quote fetching."""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from yquotes.config import Settings, settings as default_settings
from yquotes.schemas.quote import Quote, QuoteResponseEnvelope
from yquotes.services.resolver import resolve_quotes

logger = logging.getLogger(__name__)

# Fixed query parameters the v7 endpoint expects alongside ``symbols``
_BASE_PARAMS = {
    "lang": "en-US",
    "region": "US",
    "corsDomain": "finance.yahoo.com",
}


class QuoteFetchError(Exception):
    """The upstream quote call failed as a whole (transport, status or payload)."""

    def __init__(self, symbols: Sequence[str], reason: str):
        self.symbols = list(symbols)
        self.reason = reason
        super().__init__(f"quote fetch failed for {','.join(self.symbols)}: {reason}")


def _build_params(symbols: Sequence[str]) -> dict[str, str]:
    return {**_BASE_PARAMS, "symbols": ",".join(symbols)}


def _request(client: httpx.Client, url: str, symbols: Sequence[str]) -> httpx.Response:
    try:
        resp = client.get(url, params=_build_params(symbols))
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise QuoteFetchError(symbols, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise QuoteFetchError(symbols, f"{type(exc).__name__}: {exc}") from exc
    return resp


def _decode(symbols: Sequence[str], content: bytes) -> QuoteResponseEnvelope:
    try:
        return QuoteResponseEnvelope.model_validate_json(content)
    except ValidationError as exc:
        raise QuoteFetchError(symbols, f"malformed response ({exc.error_count()} errors)") from exc


def fetch_quotes(
    symbols: Sequence[str],
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> list[Quote]:
    """Fetch and resolve quotes for ``symbols`` in one upstream call.

    Returns quotes in the order Yahoo lists them. Symbols Yahoo does not know
    are simply absent. An empty symbol list returns [] without a request.

    Raises QuoteFetchError on transport errors, non-2xx responses, undecodable
    payloads, or an error object in the envelope. There is no retry.
    """
    if not symbols:
        return []

    cfg = settings or default_settings

    if client is None:
        with httpx.Client(
            timeout=cfg.upstream_timeout,
            headers={"User-Agent": cfg.user_agent},
            follow_redirects=True,
        ) as owned:
            resp = _request(owned, cfg.upstream_url, symbols)
    else:
        resp = _request(client, cfg.upstream_url, symbols)

    body = _decode(symbols, resp.content).quote_response
    if body.error is not None:
        raise QuoteFetchError(symbols, f"upstream error: {body.error!r}")

    records = body.result or []
    if len(records) < len(symbols):
        logger.debug(
            "Yahoo returned %d/%d requested symbols", len(records), len(symbols),
        )
    return resolve_quotes(records)
