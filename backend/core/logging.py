import logging
import sys

APP_LOGGER = "floorstock"

# Per-request access lines from scanning stations drown out movement logs.
_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Route everything through one stdout handler on the root logger.

    Safe to call again (tests, uvicorn reload): existing root handlers are
    replaced. Returns the ``floorstock`` application logger.
    """
    level = level.upper()
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)

    return logging.getLogger(APP_LOGGER)
