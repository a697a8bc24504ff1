"""Unwrapping of SNS notification envelopes."""

import json

ENVELOPE_FIELD = "Message"


def decode(body: str | None) -> str | None:
    """
    Return the inner payload of an SNS envelope, or the body unchanged.

    Only one level is unwrapped. Bodies that are not JSON objects, or whose
    "Message" field is missing or not a string, pass through as-is.

    Args:
        body: Raw message body.

    Returns:
        Decoded body, or None when body is None.
    """
    if body is None:
        return None

    try:
        content = json.loads(body)
    except (ValueError, RecursionError):
        return body

    if not isinstance(content, dict):
        return body

    message = content.get(ENVELOPE_FIELD)
    if isinstance(message, str):
        return message
    return body
