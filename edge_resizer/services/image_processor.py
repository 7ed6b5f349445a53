"""Pillow-backed resize engine.

Semantics of a :class:`TransformRequest`:

* width only / height only -- scale, preserving the aspect ratio;
* both -- cover the requested box and crop the overflow around the centre;
* neither -- re-encode the image unchanged in size.

The output is always written in the source format so the sniffed MIME type
remains accurate for the transformed bytes.
"""
from __future__ import annotations

import io
import logging
import math
from typing import Any, Optional

from PIL import Image, ImageOps

from edge_resizer.models import TransformRequest

logger = logging.getLogger(__name__)

_JPEG_MODES = ("1", "L", "RGB", "CMYK")

# Formats Pillow can read but that are served under another type.
_SAVE_FORMATS = {"MPO": "JPEG"}


class TransformError(Exception):
    """Raised when the image cannot be decoded, resized or re-encoded."""


def resize_image(file_bytes: bytes, request: TransformRequest, *, quality: int = 85) -> bytes:
    width = _dimension(request.width, "width")
    height = _dimension(request.height, "height")

    try:
        with Image.open(io.BytesIO(file_bytes)) as img:
            fmt = _SAVE_FORMATS.get(img.format, img.format)
            if width and height:
                result = ImageOps.fit(img, (width, height), method=Image.Resampling.LANCZOS)
            elif width:
                result = img.resize((width, _scaled(img.height, width, img.width)), Image.Resampling.LANCZOS)
            elif height:
                result = img.resize((_scaled(img.width, height, img.height), height), Image.Resampling.LANCZOS)
            else:
                logger.debug("No dimensions requested; re-encoding %s without resizing", fmt)
                result = img.copy()

            if fmt == "JPEG" and result.mode not in _JPEG_MODES:
                result = result.convert("RGB")

            buffer = io.BytesIO()
            result.save(buffer, format=fmt, **_save_options(fmt, quality))
    except (OSError, ValueError, KeyError) as exc:
        raise TransformError(f"Cannot resize image: {exc}") from exc

    logger.debug("Resized %s image to width=%s height=%s", fmt, width, height)
    return buffer.getvalue()


def _dimension(value: int | float | None, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, float) and (math.isnan(value) or not value.is_integer()):
        raise TransformError(f"Expected positive integer for {name} but received {value}")
    if value <= 0:
        raise TransformError(f"Expected positive integer for {name} but received {value}")
    return int(value)


def _scaled(side: int, target: int, reference: int) -> int:
    return max(1, round(side * target / reference))


def _save_options(fmt: str, quality: int) -> dict[str, Any]:
    if fmt in ("JPEG", "WEBP"):
        return {"quality": quality}
    return {}
