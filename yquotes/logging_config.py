"""Root logging setup for the exporter process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_from_verbosity(verbose: int, default: str = "INFO") -> str:
    """Map a repeated ``-v`` count to a logging level name."""
    if verbose >= 1:
        return "DEBUG"
    return default.upper()


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger (once) and set its level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
