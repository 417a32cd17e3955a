# core/wire/codec.py
from __future__ import annotations
import json
import re
from typing import Any

from core.wire.messages import BaseResponse, EnqueueRequest


class MalformedRequest(ValueError):
    """Request body could not be decoded into the expected shape."""


class SerializationFailure(Exception):
    """A response record could not be encoded."""


# json.loads keeps unpaired \uD800-\uDFFF escapes; they cannot be written back as UTF-8
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def decode_enqueue(raw: bytes) -> EnqueueRequest:
    """
    Decode a POST /enqueue body.
    Must be a JSON object; `event`, when present, must be a string.
    Unknown fields are ignored and a missing `event` decodes to "".
    Unpaired surrogates in `event` become U+FFFD.
    """
    try:
        doc: Any = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise MalformedRequest(f"request body is not valid UTF-8: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise MalformedRequest(str(e)) from e

    if not isinstance(doc, dict):
        raise MalformedRequest(f"request body must be a JSON object, got {type(doc).__name__}")

    event = doc.get("event", "")
    if not isinstance(event, str):
        raise MalformedRequest(f'field "event" must be a string, got {type(event).__name__}')
    return EnqueueRequest(event=_LONE_SURROGATE.sub("\ufffd", event))


def encode(resp: BaseResponse) -> bytes:
    """Compact, newline-terminated JSON."""
    try:
        body = json.dumps(resp.to_record(), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return (body + "\n").encode("utf-8")
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError (lone surrogates) is a ValueError too
        raise SerializationFailure(str(e)) from e
