from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# S3 GetObject attributes the responder knows how to turn into headers.
METADATA_ATTRIBUTES = (
    "CacheControl",
    "ContentDisposition",
    "ContentEncoding",
    "ContentLanguage",
    "ContentType",
    "ETag",
    "Expires",
    "LastModified",
)


class OriginObject(BaseModel):
    """Bytes and storage metadata of an object fetched from the origin bucket."""

    model_config = ConfigDict(frozen=True)

    body: bytes
    metadata: dict[str, Any] = Field(default_factory=dict)


class SniffedType(BaseModel):
    model_config = ConfigDict(frozen=True)

    mime: str
    extension: str  # e.g., "png"
