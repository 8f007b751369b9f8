import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


HANDLER_NAME = "assoclist"

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> str:
    """Get the default logging level for assoclist."""
    return os.getenv("ASSOCLIST_LOGGING_LEVEL", "WARNING")


def get_handler(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the default logging handler for assoclist.

    Library consumers see nothing unless they opt in by setting
    ``ASSOCLIST_USE_DEV_LOGGER=true``."""
    handler = (
        logging.StreamHandler()
        if os.getenv("ASSOCLIST_USE_DEV_LOGGER", "").lower() == "true"
        else logging.NullHandler()
    )
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> None:
    """Configure the assoclist root logger.

    Calling this more than once replaces the handler installed by the previous
    call rather than adding another."""
    level = level or get_level()
    logger = logging.getLogger("assoclist")
    logger.setLevel(level)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(get_handler(level=level, fmt=fmt))
