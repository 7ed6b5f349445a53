"""Amazon S3 helper for the edge responder.

Fetches the origin object addressed by a CloudFront request, returning its
bytes together with the subset of ``GetObject`` attributes that are
propagated as response headers.  The boto3 client is created lazily on first
use and reused for every later fetch served by the same execution context.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from edge_resizer.models import METADATA_ATTRIBUTES, OriginObject

logger = logging.getLogger(__name__)


class OriginFetchError(Exception):
    """Raised when the origin object cannot be fetched.

    ``status`` carries the HTTP status S3 answered with (404, 403, ...), or
    ``None`` when the request never produced one (e.g. connection failure).
    """

    def __init__(self, status: Optional[int], message: str) -> None:
        super().__init__(f"Origin fetch failed ({status}): {message}")
        self.status = status


class StorageService:  # pylint: disable=too-few-public-methods
    """Read-only wrapper around S3 ``GetObject``."""

    def __init__(
        self,
        *,
        region: str,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            logger.debug("Creating S3 client for region %s", self._region)
            self._client = boto3.client("s3", region_name=self._region, endpoint_url=self._endpoint_url)
        return self._client

    def fetch(self, bucket: str, key: str) -> OriginObject:
        """Download ``s3://{bucket}/{key}`` and return it as an :class:`OriginObject`."""

        logger.debug("GET s3://%s/%s", bucket, key)
        try:
            result = self.client.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            error = exc.response.get("Error", {})
            status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            raise OriginFetchError(status, error.get("Code") or str(exc)) from exc
        except BotoCoreError as exc:
            raise OriginFetchError(None, str(exc)) from exc

        body = result["Body"].read()
        metadata = {name: result[name] for name in METADATA_ATTRIBUTES if result.get(name) is not None}
        logger.debug("Fetched %d bytes from s3://%s/%s", len(body), bucket, key)
        return OriginObject(body=body, metadata=metadata)
