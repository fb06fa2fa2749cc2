"""Yahoo Finance data fetching.

All public names are re-exported here so consumers can use:
    from yquotes.services.yahoo import <name>
"""

from yquotes.services.yahoo.quotes import QuoteFetchError, fetch_quotes

__all__ = [
    "QuoteFetchError",
    "fetch_quotes",
]
