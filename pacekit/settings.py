from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pacekit.units import DistanceUnit, TimeUnit


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    distance_unit: DistanceUnit = Field(DistanceUnit.KM, alias="PACE_DISTANCE_UNIT")
    time_unit: TimeUnit = Field(TimeUnit.S, alias="PACE_TIME_UNIT")
    clock_placeholder: str = Field("--:--:--", alias="CLOCK_PLACEHOLDER")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
