from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore .env vars not in this model
    )

    # App
    APP_NAME: str = "Amharic News Classification Dashboard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Classification service
    CLASSIFIER_URL: str = "http://localhost:5000/classify"
    CLASSIFIER_TIMEOUT: float = 30.0

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    LOG_LEVEL: str = "info"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
