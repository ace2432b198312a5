from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "file:./data.db"
    STORAGE_BACKEND: str = "sql"
    API_PREFIX: str = "/api/v1"
    TESTING: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    CALENDAR_SERVICE_URL: str = "http://localhost:5000"
    CALENDAR_TIMEZONE: Optional[str] = None
    CALENDAR_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
