"""Central logging configuration for the library."""
from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_LEVEL = "INFO"
_LEVEL_ENV = "RICHDOC_LOG_LEVEL"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configured_level() -> int:
    name = os.environ.get(_LEVEL_ENV, _DEFAULT_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger, installing the root handler on first use."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_configured_level(), format=_FORMAT)
    return logger
