"""Authentication helpers for the Gmail and OpenAI APIs."""

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from openai import OpenAI
from rich.markup import escape

from gmail_inbox_triage.constants import CONFIG_DIR, CREDENTIALS_PATH, SCOPES, TOKEN_PATH
from gmail_inbox_triage.display import console


def _load_cached_credentials() -> Credentials | None:
    if not TOKEN_PATH.exists():
        return None
    creds = Credentials.from_authorized_user_file(str(TOKEN_PATH))
    # A token granted for a narrower scope cannot delete; re-consent instead.
    if not creds.has_scopes(SCOPES):
        return None
    return creds


def get_gmail_service() -> Resource:
    """Return an authenticated Gmail API service object.

    Reuses the token cached at TOKEN_PATH, refreshing it when expired.
    Without a usable token the OAuth consent flow runs in the browser,
    which needs the client secrets at CREDENTIALS_PATH.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    creds = _load_cached_credentials()

    if creds and creds.expired and creds.refresh_token:
        creds.refresh(Request())
    elif not creds or not creds.valid:
        if not CREDENTIALS_PATH.exists():
            raise FileNotFoundError(
                f"Credentials file not found at {CREDENTIALS_PATH}.\n"
                "Create an OAuth desktop client in the Google Cloud Console, "
                "enable the Gmail API, and save the client JSON as:\n"
                f"  {CREDENTIALS_PATH}"
            )
        flow = InstalledAppFlow.from_client_secrets_file(str(CREDENTIALS_PATH), SCOPES)
        creds = flow.run_local_server(port=0)

    TOKEN_PATH.write_text(creds.to_json())

    return build("gmail", "v1", credentials=creds)


def get_openai_client(api_key: str) -> OpenAI:
    """Return an OpenAI client for the classification calls."""
    return OpenAI(api_key=api_key)


def check_auth() -> bool:
    """Check that the Gmail API is reachable with the cached credentials.

    Prints the authenticated address and inbox size on success.
    """
    try:
        service = get_gmail_service()
        profile = service.users().getProfile(userId="me").execute()
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Authentication failed: {escape(str(exc))}[/red]")
        return False

    console.print(
        f"[green]Authenticated as {profile['emailAddress']}[/green] "
        f"({profile.get('messagesTotal', 0)} messages in mailbox)"
    )
    return True
