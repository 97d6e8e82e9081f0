"""Triage orchestration - pages through the inbox and processes each message."""

from __future__ import annotations

from .classifier import EmailClassifier
from .decoder import decode_message
from .display import console, print_page_fetched, report_statistics
from .executor import process_message
from .gmail_client import fetch_page
from .models import RunStatistics


def run_triage(
    service,
    classifier: EmailClassifier,
    dry_run: bool = False,
    max_pages: int | None = None,
) -> RunStatistics:
    """Run a full triage pass over the inbox and report totals at the end.

    Pages are drained strictly in order, and each message is decoded,
    classified and acted upon before the next one starts. The run ends when
    a page comes back without a continuation token, or after ``max_pages``.
    """
    stats = RunStatistics()
    page_token: str | None = None

    while True:
        page = fetch_page(service, page_token)
        stats.add_page(len(page.messages))
        print_page_fetched(stats.pages_fetched, len(page.messages))

        for ref in page.messages:
            data = decode_message(service, ref)
            stats.accumulate(process_message(service, ref, data, classifier, dry_run=dry_run))

        page_token = page.next_token
        if not page_token:
            break
        if max_pages is not None and stats.pages_fetched >= max_pages:
            console.print(f"[yellow]Stopping after {max_pages} pages (--max-pages).[/yellow]")
            break

    report_statistics(stats)
    return stats
