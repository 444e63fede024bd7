from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    log_level: str = "info"
    log_format: str = "console"

    model_config = {
        "env_prefix": "COUNTRYINFO_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _normalize_logging(self):
        """Accept log settings in any case, reject unknown values."""
        self.log_level = self.log_level.strip().lower()
        self.log_format = self.log_format.strip().lower()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
