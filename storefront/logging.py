"""
Logging setup for the storefront.

    from storefront.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        # pytest or uvicorn got there first
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    # The Stripe SDK logs every request at INFO
    logging.getLogger("stripe").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Shorten an id for log output.

    Session and provider ids are cut to their first 8 characters, and
    line breaks are escaped so a crafted id cannot forge log lines.
    """
    if not id_value:
        return "N/A"
    safe_value = str(id_value).replace("\r", "\\r").replace("\n", "\\n")
    return safe_value[:8]
