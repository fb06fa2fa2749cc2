"""Process-wide exporter metrics.

Created once at import against the default registry and only ever
incremented/observed afterwards. prometheus_client updates are thread-safe,
so concurrent scrapes share these without extra locking.
"""

from prometheus_client import Counter, Summary

NAMESPACE = "yquotes"

QUERY_DURATION = Summary(
    "query_duration_seconds",
    "Duration of queries to the yahoo API",
    namespace=NAMESPACE,
)
QUERY_COUNT = Counter(
    "queries_total",
    "Count of completed queries",
    ["symbol"],
    namespace=NAMESPACE,
)
ERROR_COUNT = Counter(
    "failed_queries_total",
    "Count of failed queries",
    ["symbol"],
    namespace=NAMESPACE,
)
