"""Simple messages shown to the user, e.g. problems found during startup"""

from dataclasses import dataclass
from enum import Enum


class MessageType(Enum):
    """Severity of a message"""
    SAY = "say"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class SimpleMessage:
    """A message with no conditions or translations attached"""
    type: MessageType
    text: str


def messages_as_markdown(messages: list[SimpleMessage]) -> str:
    """Render messages as a Markdown list under a "Messages" heading.

    Returns an empty string when there are no messages.
    """
    if not messages:
        return ""

    prefixes = {
        MessageType.SAY: "Note: ",
        MessageType.WARN: "Warning: ",
        MessageType.ERROR: "Error: ",
    }

    content = "## Messages\n\n"
    for message in messages:
        content += f"- {prefixes[message.type]}{message.text}\n"

    return content
