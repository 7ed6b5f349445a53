"""Shared fixtures: in-memory images, CloudFront requests and a fake origin."""
from __future__ import annotations

import io
from typing import Any

import pytest
from PIL import Image

from edge_resizer.handlers.origin_request import OriginRequestResponder
from edge_resizer.models import OriginObject


def make_image(fmt: str = "PNG", size: tuple[int, int] = (200, 100), mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color=(200, 30, 30) if mode == "RGB" else 128).save(buffer, format=fmt)
    return buffer.getvalue()


PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n"

# Plain text that happens to look like an X bitmap header.
XBM_LIKE_TEXT = b"#define foo_width 4\n#define foo_height 4\nstatic char foo_bits[] = { 0x00, 0x00, 0x00, 0x00 };\n"


def make_mpo(size: tuple[int, int] = (200, 100)) -> bytes:
    """JPEG carrying a multi-picture index, as phone cameras write them."""
    buffer = io.BytesIO()
    first = Image.new("RGB", size, color=(10, 120, 200))
    second = Image.new("RGB", size, color=(200, 120, 10))
    first.save(buffer, format="MPO", save_all=True, append_images=[second])
    return buffer.getvalue()


def make_request(querystring: str = "", uri: str = "/choice_images/2.png") -> dict[str, Any]:
    return {
        "clientIp": "49.49.219.90",
        "headers": {"host": [{"key": "Host", "value": "simplesat-upload-files-dev.s3.amazonaws.com"}]},
        "method": "GET",
        "origin": {
            "s3": {
                "authMethod": "none",
                "customHeaders": {},
                "domainName": "simplesat-upload-files-dev.s3.amazonaws.com",
                "path": "",
            }
        },
        "querystring": querystring,
        "uri": uri,
    }


class FakeStorage:
    """Stands in for StorageService; records every fetch."""

    def __init__(self, result: OriginObject | Exception) -> None:
        self._result = result
        self.calls: list[tuple[str, str]] = []

    def fetch(self, bucket: str, key: str) -> OriginObject:
        self.calls.append((bucket, key))
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


@pytest.fixture
def png_bytes() -> bytes:
    return make_image("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image("JPEG")


@pytest.fixture
def responder_for():
    """Build a responder around a FakeStorage returning *result*."""

    def _build(result: OriginObject | Exception) -> tuple[OriginRequestResponder, FakeStorage]:
        storage = FakeStorage(result)
        return OriginRequestResponder(storage, quality=85), storage  # type: ignore[arg-type]

    return _build
