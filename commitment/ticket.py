"""Ticket extraction for commitment.

A ticket is an issue-tracker reference such as ``ABC-123``: an uppercase
project key, a hyphen and an issue number. Branch names and messages often
carry noise right after the number (``ABC-123-v12``, ``ABC-123b``); only the
key and number are kept.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# The key must not be glued to a preceding letter or digit. Issue numbers
# longer than 18 digits are not tickets.
TICKET_PATTERN = re.compile(r"(?<![A-Za-z0-9])(?P<key>[A-Z]+)-(?P<number>\d{1,18})(?!\d)")

# A ticket opening the text, its trailing noise and the whitespace after it.
LEADING_TICKET_PATTERN = re.compile(r"^\s*(?P<key>[A-Z]+)-(?P<number>\d{1,18})(?!\d)\S*(?:\s+|$)")


class Ticket(BaseModel):
    """Normalized ticket reference.

    Attributes:
        project_key: Uppercase project key (e.g., "ABC").
        issue_number: Issue number within the project.
    """

    model_config = ConfigDict(frozen=True)

    project_key: str = Field(pattern=r"^[A-Z]+$")
    issue_number: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.project_key}-{self.issue_number}"


def _ticket_from_match(match: re.Match) -> Ticket:
    return Ticket(project_key=match.group("key"), issue_number=int(match.group("number")))


def extract_ticket(text: str) -> Optional[Ticket]:
    """Extract the first ticket from a branch name or message.

    Args:
        text: Arbitrary text, e.g. "feature/ABC-123-v12".

    Returns:
        The normalized ticket, or None if the text holds no ticket.
    """
    match = TICKET_PATTERN.search(text)
    if match:
        return _ticket_from_match(match)
    return None


def split_ticket(text: str) -> tuple[Optional[Ticket], str]:
    """Split a leading ticket off a message.

    Examples:
        "ABC-123 fix login"   -> (ABC-123, "fix login")
        "ABC-123x fix login"  -> (ABC-123, "fix login")
        "ABC-123-v2"          -> (ABC-123, "")
        "fix ABC-123"         -> (None, "fix ABC-123")

    Args:
        text: The raw commit message.

    Returns:
        Tuple of (ticket or None, remaining text).
    """
    match = LEADING_TICKET_PATTERN.match(text)
    if not match:
        return None, text
    return _ticket_from_match(match), text[match.end():]
