# gestion_transporte/core/logging_config.py
import logging

from gestion_transporte.core.config import Settings

LOG_FORMAT = "%(asctime)s | {environment} | %(levelname)s | %(name)s | %(message)s"


def setup_logging(settings: Settings) -> None:
    """
    Attach console (and optional file) handlers to the root logger.

    ``LOG_LEVEL`` uses the lowercase names of the settings file ("info",
    "debug"...); unknown names fall back to info. Only the first call
    configures anything.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    root.setLevel(level if isinstance(level, int) else logging.INFO)

    formatter = logging.Formatter(
        LOG_FORMAT.format(environment=settings.ENVIRONMENT),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler()]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
