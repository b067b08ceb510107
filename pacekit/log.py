from __future__ import annotations

import json
import logging
from typing import Any

from pacekit.settings import get_settings

LOGGER_NAME = "pacekit"
logger = logging.getLogger(LOGGER_NAME)


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, separators=(",", ":"), default=str))
