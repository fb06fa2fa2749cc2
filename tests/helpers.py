"""Shared test helpers: Yahoo-shaped payloads and a fake upstream."""

import json

import httpx

from yquotes.schemas.quote import QuoteRecord


def yahoo_record(symbol: str = "AAPL", **fields) -> dict:
    """Return a raw v7 quote entry as Yahoo would send it."""
    record = {
        "symbol": symbol,
        "shortName": f"{symbol} Inc.",
        "marketState": "REGULAR",
        "currency": "USD",
        "fullExchangeName": "NasdaqGS",
        "exchangeDataDelayedBy": 0,
        "regularMarketPrice": 100.0,
        "regularMarketPreviousClose": 98.0,
        "regularMarketOpen": 99.0,
        "regularMarketDayHigh": 101.0,
        "regularMarketDayLow": 97.5,
        "regularMarketDayRange": "97.5 - 101.0",
        "regularMarketChange": 2.0,
        "regularMarketChangePercent": 2.04,
        "regularMarketVolume": 1_000_000,
        "quoteType": "EQUITY",
    }
    record.update(fields)
    return record


def make_record(symbol: str = "AAPL", **fields) -> QuoteRecord:
    return QuoteRecord.model_validate(yahoo_record(symbol, **fields))


def quote_payload(*records: dict, error=None) -> dict:
    return {"quoteResponse": {"result": list(records), "error": error}}


def upstream_client(payload=None, *, status: int = 200, raw: bytes | None = None, calls: list | None = None):
    """Build an httpx.Client whose transport answers every request with ``payload``.

    Each request is appended to ``calls`` when given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        content = raw if raw is not None else json.dumps(payload).encode()
        return httpx.Response(status, content=content, headers={"Content-Type": "application/json"})

    return httpx.Client(transport=httpx.MockTransport(handler))
