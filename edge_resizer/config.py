from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Responder configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # AWS / S3 origin
    # Lambda@Edge replicas run in many regions, so AWS_REGION is not the bucket's.
    origin_region: str = Field("eu-west-1", validation_alias="ORIGIN_REGION")
    s3_endpoint_url: Optional[str] = Field(
        default=None,
        validation_alias="S3_ENDPOINT_URL",
        description="Override S3 endpoint, e.g. for a local S3 emulator.",
    )

    # Image processing
    jpeg_quality: int = Field(
        85, ge=1, le=100, validation_alias="JPEG_QUALITY", description="Quality for re-encoded JPEG/WebP output (1-100)."
    )

    # Logging
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
