"""Rich-based display functions for Gmail Inbox Triage."""

from rich.console import Console
from rich.markup import escape

from .models import MessageData, MessageRef, RunStatistics

console = Console()


def print_failure(action: str, exc: BaseException) -> None:
    """Report a non-fatal failure; the run carries on afterwards."""
    console.print(f"[blue]Failed to {action}: {escape(str(exc))}[/blue]")


def print_page_fetched(page_number: int, message_count: int) -> None:
    console.print(f"[dim]Fetched page {page_number} of emails ({message_count} messages)[/dim]")


def print_message_fetched(data: MessageData) -> None:
    console.print(
        f"Fetched email - Subject: {escape(str(data.subject))}, "
        f"Sender: {escape(str(data.sender))}"
    )


def print_kept(ref: MessageRef) -> None:
    console.print(f"[green]Email {ref.message_id} is worth the time, keeping it[/green]")


def print_deleted(ref: MessageRef) -> None:
    console.print(f"[red]Email {ref.message_id} is not worth the time, deleted[/red]")


def print_would_delete(ref: MessageRef) -> None:
    console.print(f"[yellow][DRY RUN] Email {ref.message_id} would be deleted[/yellow]")


def report_statistics(stats: RunStatistics) -> None:
    """Print the run-end report: fetched, pages, deleted, final count."""
    console.print(f"Total number of emails fetched: {stats.messages_fetched}")
    console.print(f"Total number of pages fetched: {stats.pages_fetched}")
    console.print(f"Total number of emails deleted: {stats.messages_deleted}")
    console.print(f"Final number of emails: {stats.final_count}")
