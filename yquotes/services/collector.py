"""On-demand Prometheus collector: one upstream fetch per scrape."""

import logging
from collections.abc import Callable, Iterable, Sequence

from prometheus_client.core import GaugeMetricFamily, Metric

from yquotes.observability.metrics import ERROR_COUNT, NAMESPACE, QUERY_COUNT, QUERY_DURATION
from yquotes.schemas.quote import Quote
from yquotes.services.yahoo import QuoteFetchError, fetch_quotes

logger = logging.getLogger(__name__)

PRICE_LABELS = ["symbol", "name", "active"]

Fetcher = Callable[[Sequence[str]], list[Quote]]


def _bool_label(value: bool) -> str:
    return "true" if value else "false"


class QuoteCollector:
    """Custom collector bound to the symbols of a single /price request.

    Build one per request and register it on a throwaway CollectorRegistry;
    the label sets it emits must never reach the process-wide registry.
    ``collect`` blocks on the upstream call.
    """

    def __init__(
        self,
        symbols: Iterable[str],
        *,
        fetcher: Fetcher | None = None,
        fail_on_error: bool = False,
    ):
        self.symbols = list(symbols)
        self.fetcher = fetcher or fetch_quotes
        self.fail_on_error = fail_on_error

    def _families(self) -> tuple[GaugeMetricFamily, GaugeMetricFamily, GaugeMetricFamily]:
        return (
            GaugeMetricFamily(f"{NAMESPACE}_last_price_dollars", "Last price paid.", labels=PRICE_LABELS),
            GaugeMetricFamily(f"{NAMESPACE}_opening_price_dollars", "Opening price.", labels=PRICE_LABELS),
            GaugeMetricFamily(
                f"{NAMESPACE}_previous_close_price_dollars", "Previous close price.", labels=PRICE_LABELS,
            ),
        )

    @staticmethod
    def _success_family() -> GaugeMetricFamily:
        return GaugeMetricFamily(
            f"{NAMESPACE}_scrape_success",
            "Whether the upstream quote fetch for this scrape succeeded.",
        )

    def describe(self) -> list[Metric]:
        # Lets the registry learn metric names without triggering a fetch
        return [*self._families(), self._success_family()]

    def collect(self) -> list[Metric]:
        symbols: list[str] = []
        for sym in self.symbols:
            if not sym:
                continue
            QUERY_COUNT.labels(sym).inc()
            logger.debug("looking up %s", sym)
            symbols.append(sym)

        last_price, opening_price, previous_close = self._families()
        success = self._success_family()

        try:
            with QUERY_DURATION.time():
                quotes = self.fetcher(symbols)
        except QuoteFetchError as exc:
            for sym in symbols:
                ERROR_COUNT.labels(sym).inc()
            logger.warning("Quote fetch failed for %d symbols: %s", len(symbols), exc.reason)
            if self.fail_on_error:
                raise
            success.add_metric([], 0)
            return [last_price, opening_price, previous_close, success]

        seen: set[tuple[str, ...]] = set()
        for quote in quotes:
            values = [quote.symbol, quote.name, _bool_label(quote.is_active)]
            if tuple(values) in seen:
                logger.debug("skipping duplicate quote for %s", quote.symbol)
                continue
            seen.add(tuple(values))
            last_price.add_metric(values, quote.price)
            opening_price.add_metric(values, quote.open)
            previous_close.add_metric(values, quote.previous_close)

        success.add_metric([], 1)
        return [last_price, opening_price, previous_close, success]
