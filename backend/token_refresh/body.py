import json
from typing import Optional
from urllib.parse import parse_qsl

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_body(raw_body: bytes, content_type: Optional[str] = None) -> dict:
    """Parse an inbound request body into a dict.

    URL-encoded forms are parsed as such, anything else is tried as JSON.
    A body that can't be parsed, or JSON that isn't an object, gives {}.
    """
    if not raw_body:
        return {}

    try:
        text = raw_body.decode()
    except UnicodeDecodeError:
        return {}

    if content_type and content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        return dict(parse_qsl(text, keep_blank_values=True))

    try:
        body = json.loads(text or "{}")
    except json.JSONDecodeError:
        return {}

    return body if isinstance(body, dict) else {}
