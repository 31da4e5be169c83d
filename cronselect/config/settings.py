from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="CRONSELECT_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="CRONSELECT_LOG_FILE")
    click_window_ms: int = Field(default=300, validation_alias="CRONSELECT_CLICK_WINDOW_MS")
    humanize_labels: bool = Field(default=False, validation_alias="CRONSELECT_HUMANIZE_LABELS")
    clock_format: Literal["12", "24"] = Field(default="24", validation_alias="CRONSELECT_CLOCK_FORMAT")
    leading_zero: bool = Field(default=False, validation_alias="CRONSELECT_LEADING_ZERO")
    periodicity_on_double_click: bool = Field(
        default=False,
        validation_alias="CRONSELECT_PERIODICITY_ON_DOUBLE_CLICK",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"CRONSELECT_LOG_LEVEL must be one of {LOG_LEVELS}, got {value!r}")
        return level

    @field_validator("click_window_ms")
    @classmethod
    def validate_click_window(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("CRONSELECT_CLICK_WINDOW_MS must be positive")
        return value


settings = Settings()
