# src/hotelpulse/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotelpulse.domain import seeding, snapshot


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Scenario engine
    # -----------------------------
    BUCKET_SECONDS: float = Field(default=seeding.BUCKET_SECONDS)

    # Matches the dashboard's 5s refresh cadence
    REFRESH_INTERVAL_MS: int = Field(default=snapshot.DEFAULT_INTERVAL_MS)

    # Largest per-tick move of the smoothed live counters
    MAX_REQUEST_DELTA: int = Field(default=snapshot.MAX_REQUEST_DELTA)
    MAX_DRIVER_DELTA: int = Field(default=snapshot.MAX_DRIVER_DELTA)

    # If true, a refresh subscription on an unknown code runs on the fallback record
    USE_FALLBACK: bool = Field(default=False)

    # -----------------------------
    # Directory
    # -----------------------------
    # CSV / parquet table replacing the built-in directory
    DIRECTORY_PATH: str | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="HOTELPULSE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("BUCKET_SECONDS", "REFRESH_INTERVAL_MS", mode="before")
    @classmethod
    def _positive(cls, v: Any) -> Any:
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("must be numeric") from err
        if f <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator("MAX_REQUEST_DELTA", "MAX_DRIVER_DELTA", mode="before")
    @classmethod
    def _non_negative_delta(cls, v: Any) -> Any:
        i = int(v)
        if i < 0:
            raise ValueError("delta must be non-negative")
        return i


config = AppConfig()
