"""Shared fixtures for tests."""

from __future__ import annotations

import pytest

from gmail_inbox_triage.models import MessageData, OwnerIdentity


@pytest.fixture
def owner() -> OwnerIdentity:
    return OwnerIdentity(first_name="Jane", last_name="Doe")


@pytest.fixture
def promo_data() -> MessageData:
    return MessageData(
        subject="50% off everything this weekend!",
        to="jane@example.com",
        sender="Deals <noreply@shop.example.com>",
        labels=("INBOX", "CATEGORY_PROMOTIONS"),
        body="Huge savings on all items. Unsubscribe here.",
    )


@pytest.fixture
def personal_data() -> MessageData:
    return MessageData(
        subject="Re: Lunch tomorrow?",
        to="Jane Doe <jane@example.com>",
        sender="John Doe <john.doe@gmail.com>",
        cc="Mary Doe <mary@example.com>",
        labels=("INBOX",),
        body="Hey Jane, want to grab lunch tomorrow at noon?",
    )
