"""Environment overrides for the bottomify command-line tool."""

import logging
import os

LOG_LEVEL_ENV = "BOTTOMIFY_LOG_LEVEL"
DELONGATE_ENV = "BOTTOMIFY_DELONGATE"


def _log_level() -> int:
    """Return the configured log level, ``WARNING`` when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    return level if level is not None else logging.WARNING


def _delongate_default() -> bool:
    """Check if alias expansion is on by default (env var set to 1)."""
    return os.environ.get(DELONGATE_ENV, "").strip() == "1"
