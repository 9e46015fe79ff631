"""Configuration settings for the document analysis service."""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Order of priority for pydantic-settings:
#
# 1. Arguments to the initializer, e.g. Settings(PORT=8080).
# 2. System environment variables, e.g. export AWS_REGION=eu-west-2.
# 3. Values from the .env file at the project root (local dev only).
# 4. Default values in the class.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):  # type: ignore
    """Configuration settings for the document analysis service."""

    model_config = SettingsConfigDict(
        # Only load .env if it exists (local dev)
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # -- AWS --
    AWS_REGION: str = "ap-south-1"

    # -- Textract call bounds --
    TEXTRACT_CONNECT_TIMEOUT_SECONDS: int = 10
    TEXTRACT_READ_TIMEOUT_SECONDS: int = 60
    # Total attempts including the first call, so 1 disables retries.
    TEXTRACT_MAX_ATTEMPTS: int = 1

    # -- HTTP server --
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: str = "public"
    MAX_UPLOAD_SIZE_BYTES: int = 10 * 1024 * 1024

    LOG_LEVEL: str = "INFO"


settings = Settings()
