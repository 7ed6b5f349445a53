"""CloudFront origin-request handler that resizes S3 images on the fly.

Requests without a ``size`` query parameter are handed back to CloudFront
untouched.  Otherwise the object is fetched from the S3 origin, resized when
its bytes are a recognised image, and returned as a generated response.
"""
from __future__ import annotations

import base64
import logging
from functools import lru_cache
from typing import Any

from edge_resizer.config import get_settings
from edge_resizer.models import Headers, ResponseEnvelope, TransformRequest
from edge_resizer.services.image_processor import resize_image
from edge_resizer.services.sniffer import sniff
from edge_resizer.services.storage import OriginFetchError, StorageService
from edge_resizer.utils.headers import headers_from_metadata, headers_from_sniffed_type
from edge_resizer.utils.logging_config import configure_logging
from edge_resizer.utils.parameters import normalize_parameters

logger = logging.getLogger(__name__)


class OriginRequestResponder:
    """Turns one CloudFront request into either the request itself or a response."""

    def __init__(self, storage: StorageService, *, quality: int = 85) -> None:
        self._storage = storage
        self._quality = quality

    def handle(self, request: dict[str, Any]) -> dict[str, Any]:
        transform = normalize_parameters(request.get("querystring"))
        if transform is None:
            return request

        try:
            envelope = self._respond(request, transform)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Edge response failed: %s", exc)
            envelope = error_response(exc)
        return envelope.to_cloudfront()

    def _respond(self, request: dict[str, Any], transform: TransformRequest) -> ResponseEnvelope:
        bucket, key = origin_location(request)
        origin = self._storage.fetch(bucket, key)

        sniffed = sniff(origin.body)
        if sniffed:
            logger.info("Resizing %s (%s) to %s", key, sniffed.mime, transform)
            body = resize_image(origin.body, transform, quality=self._quality)
            headers = headers_from_sniffed_type(sniffed)
        else:
            logger.info("%s is not a recognised image; serving original bytes", key)
            body = origin.body
            headers = headers_from_metadata(origin.metadata)

        return success_response(body, headers)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def origin_location(request: dict[str, Any]) -> tuple[str, str]:
    """Return ``(bucket, key)`` for the S3 origin a request is routed to."""

    domain_name = request["origin"]["s3"]["domainName"]
    bucket = domain_name.split(".")[0]
    key = request["uri"][1:]
    return bucket, key


def success_response(body: bytes, headers: Headers) -> ResponseEnvelope:
    return ResponseEnvelope(
        status=200,
        status_description="OK",
        body=base64.b64encode(body).decode("ascii"),
        body_encoding="base64",
        headers=headers,
    )


def error_response(exc: Exception) -> ResponseEnvelope:
    if isinstance(exc, OriginFetchError) and exc.status:
        return ResponseEnvelope(status=exc.status)
    return ResponseEnvelope(status=500, body=f"{exc.__class__.__name__}: {exc}")


# ---------------------------------------------------------------------------
# Lambda entry point
# ---------------------------------------------------------------------------


@lru_cache()
def get_responder() -> OriginRequestResponder:  # pragma: no cover
    settings = get_settings()
    configure_logging(settings.log_level)
    storage = StorageService(region=settings.origin_region, endpoint_url=settings.s3_endpoint_url)
    return OriginRequestResponder(storage, quality=settings.jpeg_quality)


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    request = event["Records"][0]["cf"]["request"]
    return get_responder().handle(request)
