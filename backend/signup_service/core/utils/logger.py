import logging
import os
from typing import Optional

_ROOT_NAME = "signup_service"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a single stream handler to the package logger.

    Calling it again only updates the level.
    """
    global _configured
    root = logging.getLogger(_ROOT_NAME)
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root.setLevel(getattr(logging, resolved, logging.INFO))
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure_logging()
    if name.startswith(_ROOT_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
