#path: src/echo_api/config.py

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    HTTPS_REDIRECT: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        # logging only knows upper-case level names
        return v.strip().upper()


settings = Settings()
