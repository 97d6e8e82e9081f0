"""LLM-backed classification of messages as promotional noise or personal mail."""

from __future__ import annotations

import json

from .constants import (
    DEFAULT_MODEL,
    DELETE_ANSWER,
    MAX_BODY_CHARS,
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    TRUNCATION_SUFFIX,
)
from .display import print_failure
from .models import MessageData, OwnerIdentity


def build_system_prompt(owner: OwnerIdentity) -> str:
    """Return the fixed classification policy for ``owner``'s inbox."""
    first = owner.first_name
    return (
        "Your task is to assist in managing the Gmail inbox of a busy individual, "
        f"{owner.full_name}, by filtering out promotional emails from their personal "
        "(i.e., not work) account. Your primary focus is to ensure that emails from "
        "individual people, whether they are known family members (with the same last "
        f"name, {owner.last_name}), close acquaintances, or potential contacts {first} "
        "might be interested in hearing from, are not ignored. You need to distinguish "
        "between promotional, automated, or mass-sent emails and personal "
        "communications.\n\n"
        'Respond with "True" if the email is promotional and should be ignored based on '
        'the below criteria, or "False" otherwise. Remember to prioritize personal '
        "communications and ensure emails from genuine individuals are not filtered out.\n\n"
        "Criteria for Ignoring an Email:\n"
        "- The email is promotional: It contains offers, discounts, or is marketing a "
        "product or service.\n"
        "- The email is automated: It is sent by a system or service automatically, and "
        "not a real person.\n"
        "- The email appears to be mass-sent or from a non-essential mailing list: It "
        f"does not address {first} by name, lacks personal context that would indicate "
        "it's personally written to them, or is from a mailing list that does not "
        "pertain to their interests or work.\n\n"
        "Special Consideration:\n"
        "- Exception: If the email is from an actual person, especially a family member "
        f"(with the same last name, {owner.last_name}), a close acquaintance, or a "
        f"potential contact {first} might be interested in, and contains personalized "
        "information indicating a one-to-one communication, do not mark it for ignoring "
        "regardless of the promotional content.\n\n"
        "- Additionally, do not ignore emails requiring an action to be taken for "
        "important matters, such as needing to send a payment via Venmo, but ignore "
        "requests for non-essential actions like purchasing discounted items or signing "
        "up for rewards programs.\n\n"
        "Be cautious: If there's any doubt about whether an email is promotional or "
        'personal, respond with "False".\n\n'
        "The user message you will receive will have the following format:\n"
        "Subject: <email subject>\n"
        "To: <to names, to emails>\n"
        "From: <from name, from email>\n"
        "Cc: <cc names, cc emails>\n"
        "Gmail labels: <labels>\n"
        "Body: <plaintext body of the email>\n\n"
        "Your response must be:\n"
        '"True" or "False"'
    )


def truncate_body(body: str, limit: int = MAX_BODY_CHARS) -> str:
    """Cap ``body`` at ``limit`` characters, marking a cut with an ellipsis."""
    if len(body) > limit:
        return body[:limit] + TRUNCATION_SUFFIX
    return body


def build_fact_sheet(data: MessageData) -> str:
    """Render the per-message user prompt."""
    return (
        f"Subject: {data.subject or ''}\n"
        f"To: {data.to or ''}\n"
        f"From: {data.sender or ''}\n"
        f"Cc: {data.cc or ''}\n"
        f"Gmail labels: {json.dumps(list(data.labels))}\n"
        f"Body: {truncate_body(data.body)}"
    )


def parse_verdict(answer: str | None) -> bool:
    """Only an exact ``True`` (ignoring surrounding whitespace) means delete."""
    if answer is None:
        return False
    return answer.strip() == DELETE_ANSWER


class EmailClassifier:
    """Asks a chat model whether a message should be deleted.

    The owner's identity and the model are fixed at construction so a single
    instance serves a whole run.
    """

    def __init__(self, client, owner: OwnerIdentity, model: str = DEFAULT_MODEL) -> None:
        self.client = client
        self.owner = owner
        self.model = model
        self.system_prompt = build_system_prompt(owner)

    def build_messages(self, data: MessageData) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": build_fact_sheet(data)},
        ]

    def classify(self, data: MessageData) -> bool:
        """Return True when ``data`` is promotional/automated and should be deleted.

        Any API or response-shape failure is reported and treated as keep.
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(data),
                max_tokens=MAX_OUTPUT_TOKENS,
                temperature=TEMPERATURE,
            )
            answer = response.choices[0].message.content
        except Exception as exc:  # noqa: BLE001
            print_failure("evaluate email", exc)
            return False
        return parse_verdict(answer)


def classify_email(client, data: MessageData, first_name: str, last_name: str) -> bool:
    """One-shot helper: classify ``data`` for the named owner."""
    return EmailClassifier(client, OwnerIdentity(first_name, last_name)).classify(data)
