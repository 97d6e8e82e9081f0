"""Data models for Gmail Inbox Triage."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MessageRef:
    """Reference to one inbox message, as returned by a list page."""

    message_id: str
    thread_id: str | None = None

    @classmethod
    def from_api(cls, entry: dict) -> MessageRef:
        return cls(message_id=entry["id"], thread_id=entry.get("threadId"))


@dataclass(frozen=True)
class Page:
    """One page of inbox references plus the cursor for the next page."""

    messages: tuple[MessageRef, ...] = ()
    next_token: str | None = None


@dataclass(frozen=True)
class MessageData:
    """Normalized content of a single message, ready for classification."""

    subject: str | None = None
    to: str | None = None
    sender: str | None = None  # From header value
    cc: str | None = None
    labels: tuple[str, ...] = ()
    body: str = ""

    @classmethod
    def empty(cls) -> MessageData:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == MessageData.empty()


@dataclass(frozen=True)
class OwnerIdentity:
    """Name of the mailbox owner, substituted into the classification policy."""

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "first_name", self.first_name.strip())
        object.__setattr__(self, "last_name", self.last_name.strip())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class RunStatistics:
    """Counters for a single triage run.

    Only the run orchestrator mutates these, through ``add_page`` and
    ``accumulate``.
    """

    pages_fetched: int = 0
    messages_fetched: int = 0
    messages_deleted: int = 0
    _pending: int = field(default=0, repr=False, compare=False)

    def add_page(self, message_count: int) -> None:
        """Record a fetched page holding ``message_count`` messages."""
        self.pages_fetched += 1
        self.messages_fetched += message_count
        self._pending += message_count

    def accumulate(self, deleted_delta: int) -> None:
        """Record the outcome of one processed message (0 kept, 1 deleted)."""
        if deleted_delta not in (0, 1):
            raise ValueError(f"deleted_delta must be 0 or 1, got {deleted_delta!r}")
        if self._pending <= 0:
            raise ValueError("accumulate called for more messages than were fetched")
        self._pending -= 1
        self.messages_deleted += deleted_delta

    @property
    def final_count(self) -> int:
        return self.messages_fetched - self.messages_deleted
