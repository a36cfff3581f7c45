"""Commit message composition for commitment."""

from loguru import logger

from commitment.ticket import extract_ticket, split_ticket


def capitalize_first(s: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    if not s:
        return s
    return s[0].upper() + s[1:]


def compose(branch_name: str, raw_message: str) -> str:
    """Build the final commit message from the branch and the user message.

    The ticket in the branch name wins; otherwise a ticket leading the
    message is used. Any leading ticket and leading whitespace are stripped
    from the message body before the body is capitalized.

        feature/ABC-123-v12 + "message"          -> "ABC-123 Message"
        main                + "ABC-123 message"  -> "ABC-123 Message"
        feature/ABC-123     + "XYZ-999 message"  -> "ABC-123 Message"
        main                + "message"          -> "Message"

    Args:
        branch_name: Name of the checked-out branch.
        raw_message: Message text as typed by the user.

    Returns:
        The formatted commit message.
    """
    branch_ticket = extract_ticket(branch_name)
    message_ticket, body = split_ticket(raw_message)
    body = capitalize_first(body.lstrip())

    ticket = branch_ticket or message_ticket
    if branch_ticket and message_ticket and branch_ticket != message_ticket:
        logger.debug(
            "Branch ticket {} overrides message ticket {}", branch_ticket, message_ticket
        )
    logger.debug("Ticket for {!r}: {}", branch_name, ticket)

    if ticket is None:
        return body
    if not body:
        return str(ticket)
    return f"{ticket} {body}"
