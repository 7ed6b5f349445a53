from .origin_object import METADATA_ATTRIBUTES, OriginObject, SniffedType
from .response import HeaderEntry, Headers, ResponseEnvelope
from .transform_request import TransformRequest

__all__ = [
    "METADATA_ATTRIBUTES",
    "OriginObject",
    "SniffedType",
    "HeaderEntry",
    "Headers",
    "ResponseEnvelope",
    "TransformRequest",
]
