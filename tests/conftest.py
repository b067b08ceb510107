from __future__ import annotations

import os

import pytest

from pacekit.settings import get_settings

os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("PACE_DISTANCE_UNIT", "km")
os.environ.setdefault("PACE_TIME_UNIT", "s")


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
