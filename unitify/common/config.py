"""Configuration management using Pydantic Settings"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field(default="unitify", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class MeasurementConfig(BaseSettings):
    """Measurement arithmetic and processing configuration"""
    comparison_tolerance: float = Field(default=1e-9, alias="UNITIFY_COMPARISON_TOLERANCE")
    report_precision: int = Field(default=6, alias="UNITIFY_REPORT_PRECISION")
    skip_invalid_lines: bool = Field(default=True, alias="UNITIFY_SKIP_INVALID_LINES")
    default_encoding: str = Field(default="utf-8", alias="UNITIFY_DEFAULT_ENCODING")

    @field_validator("comparison_tolerance")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        if v < 0:
            raise ValueError("UNITIFY_COMPARISON_TOLERANCE must be non-negative")
        return v

    @field_validator("report_precision")
    @classmethod
    def validate_precision(cls, v: int) -> int:
        if not 1 <= v <= 17:
            raise ValueError("UNITIFY_REPORT_PRECISION must be between 1 and 17")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Global settings"""
    app: AppConfig = Field(default_factory=AppConfig)
    measurement: MeasurementConfig = Field(default_factory=MeasurementConfig)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
