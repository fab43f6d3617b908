"""
Logging setup for the café app.

Call setup_logging() once at startup (main.py does this on import). Every
module then logs through logging.getLogger(__name__), which lands under the
"cafe" logger configured here.

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL, any case (default: INFO)

Usernames, passwords and session tokens must not appear in INFO+ messages;
route handlers log user ids only.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty at INFO: one line per SQL statement / HTTP request
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx")


def resolve_level(level: str = None) -> str:
    """Pick the level name from the argument, then LOG_LEVEL, else INFO."""
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    if name not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "INFO"
    return name


def setup_logging(level: str = None) -> None:
    """
    Configure stdout logging for the app.

    Args:
        level: Level name; falls back to LOG_LEVEL, then INFO. Unknown
               names fall back to INFO.
    """
    name = resolve_level(level)
    numeric_level = getattr(logging, name)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("cafe").setLevel(numeric_level)

    # SQL echo and access lines only show up when debugging
    quiet_level = logging.DEBUG if name == "DEBUG" else logging.WARNING
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)

    logging.getLogger(__name__).debug("Logging configured at %s level", name)
