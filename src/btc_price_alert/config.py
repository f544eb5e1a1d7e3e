"""Runtime configuration, read from PRICE_ALERT_* environment variables."""
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from btc_price_alert.alerts import DEFAULT_ALERT_SOUND
from btc_price_alert.providers.crypto.kraken import KrakenProvider

ENV_PREFIX = "PRICE_ALERT_"


class MonitorSettings(BaseModel):
    """Settings fixed at process start.

    Defaults reproduce the long-standing behaviour: poll every 5 seconds and
    alert on a 0.001% move.
    """

    base_url: str = KrakenProvider.BASE_URL
    pair: str = KrakenProvider.DEFAULT_PAIR
    result_key: str | None = KrakenProvider.DEFAULT_RESULT_KEY
    poll_interval_seconds: float = Field(default=5.0, gt=0)
    alert_threshold: float = Field(default=0.00001, gt=0, le=1)
    alert_sound_path: Path = DEFAULT_ALERT_SOUND
    alert_duration_seconds: float = Field(default=1.0, ge=0)
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: str = "INFO"

    @field_validator("result_key", mode="before")
    @classmethod
    def _empty_result_key_means_auto(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MonitorSettings":
        """Build settings from PRICE_ALERT_* variables; unset ones keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        names = {
            "BASE_URL": "base_url",
            "PAIR": "pair",
            "RESULT_KEY": "result_key",
            "POLL_INTERVAL": "poll_interval_seconds",
            "THRESHOLD": "alert_threshold",
            "SOUND": "alert_sound_path",
            "DURATION": "alert_duration_seconds",
            "REQUEST_TIMEOUT": "request_timeout_seconds",
            "LOG_LEVEL": "log_level",
        }
        values = {
            field: env[ENV_PREFIX + suffix]
            for suffix, field in names.items()
            if ENV_PREFIX + suffix in env
        }
        return cls.model_validate(values)
