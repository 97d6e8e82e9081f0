"""Act on classification verdicts: delete or keep a single message."""

from __future__ import annotations

from .classifier import EmailClassifier
from .display import print_deleted, print_failure, print_kept, print_would_delete
from .gmail_client import delete_message
from .models import MessageData, MessageRef


def apply_verdict(service, ref: MessageRef, verdict: bool, dry_run: bool = False) -> int:
    """Delete ``ref`` when ``verdict`` is True.

    Returns the number of messages deleted (0 or 1). A failed delete is
    reported and counts as kept; it is not retried.
    """
    if not verdict:
        print_kept(ref)
        return 0

    if dry_run:
        print_would_delete(ref)
        return 0

    try:
        delete_message(service, ref.message_id)
    except Exception as exc:  # noqa: BLE001
        print_failure("delete email", exc)
        return 0

    print_deleted(ref)
    return 1


def process_message(
    service,
    ref: MessageRef,
    data: MessageData,
    classifier: EmailClassifier,
    dry_run: bool = False,
) -> int:
    """Classify ``data`` and apply the verdict to ``ref``.

    A classification that raises never leads to a delete.
    """
    try:
        verdict = classifier.classify(data)
    except Exception as exc:  # noqa: BLE001
        print_failure("evaluate email", exc)
        return 0

    return apply_verdict(service, ref, verdict, dry_run=dry_run)
