"""Fakes and builders shared by the test modules."""

from __future__ import annotations

import base64
from types import SimpleNamespace
from unittest.mock import MagicMock

from gmail_inbox_triage.models import MessageData


def b64(text: str) -> str:
    """Encode text the way Gmail encodes body data (URL-safe base64)."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")


def make_raw_message(
    message_id: str,
    *,
    subject: str = "Hello",
    sender: str = "Alice Smith <alice@example.com>",
    to: str = "Jane Doe <jane@example.com>",
    body: str = "Hi Jane, are we still on for dinner?",
    labels: list[str] | None = None,
) -> dict:
    return {
        "id": message_id,
        "labelIds": labels if labels is not None else ["INBOX"],
        "payload": {
            "mimeType": "text/plain",
            "headers": [
                {"name": "Subject", "value": subject},
                {"name": "From", "value": sender},
                {"name": "To", "value": to},
            ],
            "body": {"data": b64(body)},
        },
    }


class _Request:
    def __init__(self, result):
        self._result = result

    def execute(self):
        if isinstance(self._result, BaseException):
            raise self._result
        return self._result


class FakeMessagesResource:
    """Stands in for ``service.users().messages()``.

    ``pages`` maps a page token (None for the first page) to either a list
    response dict or an exception to raise.
    """

    def __init__(self, pages: dict, messages: dict | None = None, failing_deletes=()):
        self.pages = pages
        self.messages = messages or {}
        self.failing_deletes = set(failing_deletes)
        self.list_calls: list[dict] = []
        self.get_calls: list[str] = []
        self.deleted: list[str] = []

    def list(self, **kwargs):
        self.list_calls.append(kwargs)
        return _Request(self.pages[kwargs.get("pageToken")])

    def get(self, userId, id, format):
        self.get_calls.append(id)
        return _Request(self.messages.get(id, KeyError(f"no message {id}")))

    def delete(self, userId, id):
        if id in self.failing_deletes:
            return _Request(RuntimeError(f"delete refused for {id}"))
        self.deleted.append(id)
        return _Request("")


class FakeGmailService:
    def __init__(self, pages: dict, messages: dict | None = None, failing_deletes=()):
        self.resource = FakeMessagesResource(pages, messages, failing_deletes)

    def users(self):
        return self

    def messages(self):
        return self.resource


class SubjectClassifier:
    """Classifier stub that decides by subject; exceptions are raised."""

    def __init__(self, verdicts: dict):
        self.verdicts = verdicts
        self.seen: list[MessageData] = []

    def classify(self, data: MessageData) -> bool:
        self.seen.append(data)
        verdict = self.verdicts.get(data.subject, False)
        if isinstance(verdict, BaseException):
            raise verdict
        return verdict


def make_openai_client(content: str | None = "False") -> MagicMock:
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    return client
