"""Content-type detection from the payload's magic bytes."""
from __future__ import annotations

import logging
from typing import Optional

import filetype

from edge_resizer.models import SniffedType

logger = logging.getLogger(__name__)


def sniff(file_bytes: bytes) -> Optional[SniffedType]:
    """Return the detected type of *file_bytes*, or ``None`` if not recognised.

    Only the leading signature is inspected; the key's file extension and any
    declared Content-Type are ignored.  Text, empty and unknown payloads yield
    ``None``.  Any recognised binary type is returned, image or not.
    """

    if not file_bytes:
        return None
    kind = filetype.guess(file_bytes)
    if kind is None:
        return None
    logger.debug("Sniffed %s (.%s)", kind.mime, kind.extension)
    return SniffedType(mime=kind.mime, extension=kind.extension)
