"""Turn a raw Gmail message into a normalized MessageData record."""

from __future__ import annotations

import base64
import binascii
import re

from .constants import PLAIN_TEXT_MIME_TYPE, TRIAGE_HEADERS
from .display import print_failure, print_message_fetched
from .gmail_client import get_message
from .models import MessageData, MessageRef


_URLSAFE_B64_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def _pad(data: str) -> str:
    return data + "=" * (-len(data) % 4)


def _urlsafe_b64decode_strict(data: str) -> bytes:
    if not _URLSAFE_B64_RE.fullmatch(data):
        raise binascii.Error("payload is not URL-safe base64")
    return base64.urlsafe_b64decode(data)


def safe_b64decode(data: str) -> bytes:
    """Decode a body payload, falling back from URL-safe to standard base64.

    If neither alphabet decodes the payload, the raw text is returned as
    bytes unchanged. Never raises on malformed input.
    """
    padded = _pad(data)
    try:
        return _urlsafe_b64decode_strict(padded)
    except (binascii.Error, ValueError):
        pass
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError):
        return data.encode("utf-8", errors="ignore")


def to_text(raw: bytes) -> str:
    """Decode bytes as UTF-8, dropping any invalid sequences."""
    return raw.decode("utf-8", errors="ignore")


def extract_body(payload: dict) -> str:
    """Return the plain-text body of a message payload.

    A single-part message uses its top-level body. Otherwise the first
    ``text/plain`` part wins and later parts are ignored; HTML-only
    messages yield an empty body.
    """
    parts = payload.get("parts") or []
    top_level = (payload.get("body") or {}).get("data")

    if not parts and top_level:
        return to_text(safe_b64decode(top_level))

    for part in parts:
        if part.get("mimeType") == PLAIN_TEXT_MIME_TYPE:
            data = (part.get("body") or {}).get("data")
            return to_text(safe_b64decode(data)) if data else ""
    return ""


def _first_header(headers: list[dict], name: str) -> str | None:
    for header in headers:
        if header.get("name") == name:
            return header.get("value")
    return None


def parse_message(raw: dict) -> MessageData:
    """Build a MessageData from a ``format=full`` Gmail message resource."""
    payload = raw.get("payload") or {}
    headers = payload.get("headers") or []
    subject, to, sender, cc = (_first_header(headers, name) for name in TRIAGE_HEADERS)

    return MessageData(
        subject=subject,
        to=to,
        sender=sender,
        cc=cc,
        labels=tuple(raw.get("labelIds") or ()),
        body=extract_body(payload),
    )


def decode_message(service, ref: MessageRef) -> MessageData:
    """Fetch and decode a message; any failure yields an empty record."""
    try:
        data = parse_message(get_message(service, ref.message_id))
    except Exception as exc:  # noqa: BLE001
        print_failure("parse email data", exc)
        return MessageData.empty()

    print_message_fetched(data)
    return data
