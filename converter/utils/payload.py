import base64
import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

_BASE64_IGNORED = re.compile(r'[\t\n\f\r ]')


class PayloadFormat(Enum):
    BASE64_JSON = 'base64_json'
    RAW_JSON = 'raw_json'


@dataclass(frozen=True)
class DetectedPayload:
    format: PayloadFormat
    value: Any


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(text: str) -> Any:
    """
    Parses strict JSON (NaN and Infinity are rejected).
    """
    return json.loads(text, parse_constant=_reject_constant)


def dump_json(value: Any) -> str:
    """
    Serializes a value as compact JSON, keeping non-ASCII characters as is.
    Non-finite floats (from out-of-range numbers like 1e400) raise ValueError.
    """
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'), allow_nan=False)


def b64_decode_unicode(text: str) -> str:
    """
    Decodes standard Base64 into UTF-8 text.

    ASCII whitespace is ignored and missing padding is tolerated; any other
    character outside the alphabet, or bytes that are not valid UTF-8, raise
    ValueError.
    """
    compact = _BASE64_IGNORED.sub('', text)
    if len(compact) % 4 == 1:
        raise ValueError("Invalid Base64 length")
    if len(compact) % 4 and '=' in compact:
        raise ValueError("Invalid Base64 padding")
    compact += '=' * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True).decode('utf-8')


def b64_encode_unicode(text: str) -> str:
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def detect_payload(text: str) -> Optional[DetectedPayload]:
    """
    Classifies decoded chunk text.

    Base64-wrapped JSON is tried first, then raw JSON. Anything else is
    opaque text and yields None.
    """
    if not text:
        return None

    try:
        return DetectedPayload(PayloadFormat.BASE64_JSON, parse_json(b64_decode_unicode(text)))
    except (ValueError, RecursionError):
        pass

    try:
        return DetectedPayload(PayloadFormat.RAW_JSON, parse_json(text))
    except (ValueError, RecursionError):
        return None
