"""yquotes command line entry point.

Usage:
    yquotes [--listen-address HOST:PORT] [-v] [--log-level LEVEL]

Environment:
    YQUOTES_LISTEN_ADDRESS      Default for --listen-address (":9666").
    YQUOTES_LOG_LEVEL           Default log level ("INFO").
    YQUOTES_UPSTREAM_URL        Yahoo v7 quote endpoint.
    YQUOTES_UPSTREAM_TIMEOUT    Upstream timeout in seconds.
    YQUOTES_FAIL_ON_FETCH_ERROR Answer /price with 502 when Yahoo fails.
"""

from __future__ import annotations

import logging

import typer
import uvicorn

from yquotes.config import settings
from yquotes.logging_config import configure_logging, level_from_verbosity

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts. An empty host binds all interfaces.

    Accepts ``:9666``, ``127.0.0.1:9666`` and ``[::1]:9666``.
    """
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise typer.BadParameter(f"expected HOST:PORT, got {address!r}")
    host = host.strip("[]") or "0.0.0.0"
    port_num = int(port)
    if not 0 < port_num < 65536:
        raise typer.BadParameter(f"port out of range: {port_num}")
    return host, port_num


# Levels both stdlib logging and uvicorn accept
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def parse_log_level(value: str) -> str:
    """Normalize a log level name to upper case, rejecting unknown names."""
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise typer.BadParameter(f"expected one of {choices}, got {value!r}")
    return level.upper()


@app.command()
def main(
    listen_address: str = typer.Option(
        settings.listen_address, "--listen-address", help="The address to listen on for HTTP requests.",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity (-v for debug)."),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Explicit log level (critical, error, warning, info, debug), overrides -v.",
    ),
) -> None:
    """Serve /price and /metrics."""
    host, port = parse_listen_address(listen_address)
    level = parse_log_level(log_level or level_from_verbosity(verbose, settings.log_level))
    configure_logging(level)
    logger.info("Listening on %s:%d", host, port)
    uvicorn.run("yquotes.main:app", host=host, port=port, log_level=level.lower())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
