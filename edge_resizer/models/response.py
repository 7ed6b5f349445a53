from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HeaderEntry(BaseModel):
    key: str  # display name, e.g., "Content-Type"
    value: str


Headers = dict[str, list[HeaderEntry]]


class ResponseEnvelope(BaseModel):
    """Generated CloudFront response.

    Serialises to the Lambda@Edge wire shape via :meth:`to_cloudfront`; fields
    left as ``None`` are omitted from the output.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: int
    status_description: str | None = Field(default=None, alias="statusDescription")
    body: str | None = None
    body_encoding: str | None = Field(default=None, alias="bodyEncoding")
    headers: Headers | None = None

    def to_cloudfront(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
