"""Gmail API client functions for paging through, fetching and deleting messages."""

from __future__ import annotations

from .constants import INBOX_LABEL, MESSAGE_FORMAT
from .display import print_failure
from .models import MessageRef, Page


def fetch_page(service, page_token: str | None = None) -> Page:
    """Fetch one page of INBOX message references.

    A failed list call is reported and degrades to an empty page with no
    continuation token, which ends pagination.
    """
    kwargs: dict = {"userId": "me", "labelIds": [INBOX_LABEL]}
    if page_token:
        kwargs["pageToken"] = page_token

    try:
        resp = service.users().messages().list(**kwargs).execute()
    except Exception as exc:  # noqa: BLE001
        print_failure("fetch emails", exc)
        return Page()

    messages = tuple(MessageRef.from_api(m) for m in resp.get("messages") or [])
    return Page(messages=messages, next_token=resp.get("nextPageToken") or None)


def get_message(service, message_id: str) -> dict:
    """Fetch the full representation (headers and MIME tree) of a message."""
    return (
        service.users()
        .messages()
        .get(userId="me", id=message_id, format=MESSAGE_FORMAT)
        .execute()
    )


def delete_message(service, message_id: str) -> None:
    """Permanently delete a message, bypassing Trash."""
    service.users().messages().delete(userId="me", id=message_id).execute()
