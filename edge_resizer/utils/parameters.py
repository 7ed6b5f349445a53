"""Query-string normalisation for resize requests.

Only ``size`` is recognised.  Accepted forms are ``<w>x<h>``, ``<w>x`` and
``x<h>`` with a case-insensitive separator; parts after the second are ignored.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional
from urllib.parse import parse_qs

from edge_resizer.models import TransformRequest

logger = logging.getLogger(__name__)

_SIZE_SEPARATOR = re.compile(r"x", re.IGNORECASE)


def normalize_parameters(querystring: str | None) -> Optional[TransformRequest]:
    """Return the requested transformation, or ``None`` to pass the request through."""

    parameters = parse_qs(querystring or "", keep_blank_values=True)
    size = parameters.get("size", [""])[0]
    normalized = normalize_size(size)
    logger.info("Normalized parameters: %s", normalized)
    return normalized


def normalize_size(value: str | None) -> Optional[TransformRequest]:
    if not value:
        return None
    parts = _SIZE_SEPARATOR.split(value)
    width = _to_number(parts[0])
    height = _to_number(parts[1]) if len(parts) > 1 else None
    request = TransformRequest(width=width, height=height)
    return request if request.has_dimensions else None


def _to_number(text: str) -> int | float | None:
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return math.nan
    return int(number) if number.is_integer() else number
