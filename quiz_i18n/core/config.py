from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # App Config
    APP_NAME: str = "Quiz I18n Content Engine"
    API_V1_STR: str = "/api/v1"

    # Environment: "development" (colored console logs) or "production" (JSON logs)
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None # Rotating file logs are disabled when unset

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()


@lru_cache()
def get_settings() -> Settings:
    return settings
