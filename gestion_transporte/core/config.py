from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # -----------------------------
    # Database
    # -----------------------------
    DATABASE_URL: str = "sqlite:///./gestion_transporte.db"
    SQL_ECHO: bool = False
    CREATE_TABLES: bool = True

    # -----------------------------
    # HTTP
    # -----------------------------
    API_PREFIX: str = ""

    # -----------------------------
    # App Environment
    # -----------------------------
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


# -----------------------------
# Cached settings instance
# -----------------------------
@lru_cache()
def get_settings() -> Settings:
    return Settings()
