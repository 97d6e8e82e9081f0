"""Constants for Gmail Inbox Triage."""

from pathlib import Path

# --- Config paths ---
CONFIG_DIR = Path.home() / ".gmail-inbox-triage"
CREDENTIALS_PATH = CONFIG_DIR / "credentials.json"
TOKEN_PATH = CONFIG_DIR / "token.json"

# --- Gmail API ---
# Permanent deletion needs the full mail scope; gmail.modify only allows trashing.
SCOPES = ["https://mail.google.com/"]
INBOX_LABEL = "INBOX"
MESSAGE_FORMAT = "full"
TRIAGE_HEADERS = ("Subject", "To", "From", "Cc")
PLAIN_TEXT_MIME_TYPE = "text/plain"

# --- Classifier ---
DEFAULT_MODEL = "gpt-4o-mini"
MAX_OUTPUT_TOKENS = 1
TEMPERATURE = 0.0
MAX_BODY_CHARS = 3000
TRUNCATION_SUFFIX = "..."
DELETE_ANSWER = "True"

# --- Environment ---
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_OPENAI_MODEL = "OPENAI_MODEL"
ENV_FIRST_NAME = "USER_FIRST_NAME"
ENV_LAST_NAME = "USER_LAST_NAME"
