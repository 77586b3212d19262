from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(
        default="",
        validation_alias="LIFTLOG_LOG_FILE",
        description="Optional rotating log file; empty means console only",
    )
    log_rotation: str = Field(default="10 MB", validation_alias="LIFTLOG_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="LIFTLOG_LOG_RETENTION")
    thresholds_file: str = Field(
        default="",
        validation_alias="LIFTLOG_THRESHOLDS_FILE",
        description="Optional YAML file with per-muscle MEV/MRV overrides",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
