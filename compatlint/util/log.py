"""Debug logging helpers."""

from __future__ import annotations

import logging
import os

from ..constants import DEBUG_ENV_VAR

LOGGER = logging.getLogger(__name__)


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip() == "1"


def debug_log(message: str, logger: logging.Logger = LOGGER) -> None:
    """Emit debug logs in debug mode only."""
    if debug_enabled():
        logger.debug("%s", message)


def configure_logging() -> None:
    """Route debug output to stderr when the debug flag is set."""
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
