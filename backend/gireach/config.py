"""Centralizes application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    # Empty means "no database configured": the file backend is used for the whole process.
    DATABASE_URL: str = ""
    DATA_DIR: str = "data"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5000", "http://localhost:8000"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    PASSWORD_HASH_ROUNDS: int = 12

    # Media upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]
    UPLOAD_DIR: str = "uploads"

    # Client content/settings stores
    CONTENT_API_BASE_URL: str = "http://localhost:8000"
    CONTENT_STORAGE_KEY: str = "gireach-content"
    CONTENT_MIRROR_FILE: str = "data/client-storage.json"
    GLOBAL_EVENT_DELAY_SECONDS: float = 0.1

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
