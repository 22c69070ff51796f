# domain_registry/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

from settings import DatabaseConfig

class Settings(BaseSettings):
    DATABASE_URL: str = DatabaseConfig.DATABASE_URL

    # Token signing; there is no safe default
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_TTL_SECONDS: int = 7 * 24 * 60 * 60

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    MAX_UPLOAD_BYTES: int = 1024 * 1024 * 1024
    LOG_LEVEL: str = "DEBUG"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

settings = Settings()
