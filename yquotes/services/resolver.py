"""Session-aware price resolution.

Turns a raw QuoteRecord into the Quote reported to Prometheus. Yahoo reports
pre-market, regular and post-market prices side by side; which of them is the
"current" price depends on ``marketState`` and on whether the extended session
has traded yet (a zero price means it has not).

Rules are checked in order and the first match wins:

1. REGULAR                      -> regular price, active, regular session
2. POST with no post-market trade -> regular price, active
3. PRE with no pre-market trade   -> regular price, inactive
4. POST                         -> post price, change stacked on regular change, active
5. PRE                          -> pre price and change, active
6. any other state with a post-market trade -> as 4, inactive
7. otherwise                    -> regular price, inactive

Post-market change is relative to the regular close, so it is added to the
regular change rather than reported on its own. Open, day high/low and
previous close always come from the regular session.
"""

from collections.abc import Iterable

from yquotes.schemas.quote import MarketState, Quote, QuoteRecord

DISPLAY_CURRENCY = "USD"


def _build(
    record: QuoteRecord,
    price: float,
    change: float,
    change_percent: float,
    *,
    active: bool,
    regular_session: bool = False,
) -> Quote:
    return Quote(
        record=record,
        price=price,
        previous_close=record.regular_market_previous_close,
        open=record.regular_market_open,
        day_high=record.regular_market_day_high,
        day_low=record.regular_market_day_low,
        change=change,
        change_percent=change_percent,
        is_active=active,
        is_regular_trading_session=regular_session,
        is_variable_precision=False,
        currency_converted=DISPLAY_CURRENCY,
        name=record.short_name,
        symbol=record.symbol,
    )


def _regular(record: QuoteRecord, *, active: bool, regular_session: bool = False) -> Quote:
    return _build(
        record,
        record.regular_market_price,
        record.regular_market_change,
        record.regular_market_change_percent,
        active=active,
        regular_session=regular_session,
    )


def _post(record: QuoteRecord, *, active: bool) -> Quote:
    return _build(
        record,
        record.post_market_price,
        record.post_market_change + record.regular_market_change,
        record.post_market_change_percent + record.regular_market_change_percent,
        active=active,
    )


def _pre(record: QuoteRecord) -> Quote:
    return _build(
        record,
        record.pre_market_price,
        record.pre_market_change,
        record.pre_market_change_percent,
        active=True,
    )


def resolve_quote(record: QuoteRecord) -> Quote:
    """Pick the effective price, change and liveness flags for one record."""
    session = record.session

    if session is MarketState.REGULAR:
        return _regular(record, active=True, regular_session=True)
    if session is MarketState.POST and record.post_market_price == 0.0:
        return _regular(record, active=True)
    if session is MarketState.PRE and record.pre_market_price == 0.0:
        return _regular(record, active=False)
    if session is MarketState.POST:
        return _post(record, active=True)
    if session is MarketState.PRE:
        return _pre(record)
    if record.post_market_price != 0.0:
        return _post(record, active=False)
    return _regular(record, active=False)


def resolve_quotes(records: Iterable[QuoteRecord]) -> list[Quote]:
    """Resolve records in order."""
    return [resolve_quote(r) for r in records]
