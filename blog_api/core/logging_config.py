import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: str = "info") -> None:
    """Configure the root logger once at startup."""
    logging.basicConfig(level=_LEVELS.get(level.lower(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger().setLevel(_LEVELS.get(level.lower(), logging.INFO))
