"""CLI entry point for Gmail Inbox Triage."""

from __future__ import annotations

import click
from dotenv import find_dotenv, load_dotenv

from .auth import check_auth, get_gmail_service, get_openai_client
from .classifier import EmailClassifier
from .constants import (
    DEFAULT_MODEL,
    ENV_FIRST_NAME,
    ENV_LAST_NAME,
    ENV_OPENAI_API_KEY,
    ENV_OPENAI_MODEL,
)
from .display import console
from .models import OwnerIdentity
from .pipeline import run_triage


@click.group()
@click.version_option(version="0.1.0", prog_name="gmail-inbox-triage")
def cli() -> None:
    """Gmail Inbox Triage - delete promotional mail, keep personal mail."""
    load_dotenv(find_dotenv(usecwd=True))


@cli.command()
@click.option("--first-name", envvar=ENV_FIRST_NAME, required=True, help="Mailbox owner's first name.")
@click.option("--last-name", envvar=ENV_LAST_NAME, required=True, help="Mailbox owner's last name.")
@click.option(
    "--openai-api-key",
    envvar=ENV_OPENAI_API_KEY,
    required=True,
    help="OpenAI API key (defaults to $OPENAI_API_KEY).",
)
@click.option("--model", envvar=ENV_OPENAI_MODEL, default=DEFAULT_MODEL, show_default=True, help="Chat model.")
@click.option("--dry-run", is_flag=True, help="Classify only; never delete.")
@click.option("--max-pages", default=None, type=click.IntRange(min=1), help="Stop after this many inbox pages.")
def run(
    first_name: str,
    last_name: str,
    openai_api_key: str,
    model: str,
    dry_run: bool,
    max_pages: int | None,
) -> None:
    """Classify every inbox message and delete the promotional ones."""
    try:
        service = get_gmail_service()
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e

    classifier = EmailClassifier(
        get_openai_client(openai_api_key),
        OwnerIdentity(first_name, last_name),
        model=model,
    )

    if dry_run:
        console.print("[yellow][DRY RUN] No messages will be deleted.[/yellow]")

    run_triage(service, classifier, dry_run=dry_run, max_pages=max_pages)


@cli.command()
def auth() -> None:
    """Test Gmail authentication."""
    check_auth()
