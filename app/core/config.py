from typing import Any

from pydantic import Json
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Service-account key as a JSON string (set in the hosting dashboard)
    FIREBASE_SERVICE_ACCOUNT: Json[dict[str, Any]]

    STUDENTS_COLLECTION: str = "students"

    ENV: str = "dev"  # "dev" or "prod"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
