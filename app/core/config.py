from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services.rules.template_loader import TEMPLATE_DIR


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_env: str = "dev"
    log_level: str = "info"
    log_dir: Path = Path("logs")
    template_dir: Path = TEMPLATE_DIR
    candidate_window: int = Field(default=3, gt=0)
    row_band_tolerance: float = Field(default=0.05, gt=0)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        """Accept any casing of a standard logging level name."""

        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


settings = Settings()
