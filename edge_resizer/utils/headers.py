"""Response header synthesis.

Two mutually exclusive modes:

* transformed -- a single ``Content-Type`` taken from the sniffed type;
* passthrough -- headers mirrored from the S3 object attributes.

Header maps use the CloudFront layout: lower-cased name mapped to a list of
``{"key": <display name>, "value": <value>}`` entries.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Mapping

from edge_resizer.models import HeaderEntry, Headers, SniffedType

_WORD_BOUNDARY = re.compile(r"(\w)([A-Z])")

_CONTENT_ATTRIBUTES = (
    "CacheControl",
    "ContentDisposition",
    "ContentEncoding",
    "ContentLanguage",
    "ContentType",
)

# attribute -> (header name, display name)
_DATE_ATTRIBUTES = {
    "Expires": ("expires", "Expires"),
    "LastModified": ("last-modified", "Last-Modified"),
}


def headers_from_sniffed_type(sniffed: SniffedType) -> Headers:
    return {"content-type": [HeaderEntry(key="Content-Type", value=sniffed.mime)]}


def headers_from_metadata(metadata: Mapping[str, Any]) -> Headers:
    headers: Headers = {}
    for attribute in _CONTENT_ATTRIBUTES:
        value = metadata.get(attribute)
        if value:
            headers[to_kebab_case(attribute)] = [HeaderEntry(key=to_header_key(attribute), value=str(value))]

    if metadata.get("ETag"):
        headers["etag"] = [HeaderEntry(key="ETag", value=str(metadata["ETag"]))]

    for attribute, (name, display_name) in _DATE_ATTRIBUTES.items():
        value = metadata.get(attribute)
        if value:
            headers[name] = [HeaderEntry(key=display_name, value=http_date(value))]

    return headers


def to_header_key(attribute: str) -> str:
    """``ContentDisposition`` -> ``Content-Disposition``"""
    return _WORD_BOUNDARY.sub(r"\1-\2", attribute)


def to_kebab_case(attribute: str) -> str:
    """``ContentDisposition`` -> ``content-disposition``"""
    return to_header_key(attribute).lower()


def http_date(value: datetime | str) -> str:
    """Format *value* as an IMF-fixdate (``Sun, 06 Nov 1994 08:49:37 GMT``).

    Naive datetimes are taken to be UTC.  Strings are assumed to be already
    formatted and are returned untouched.
    """

    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
