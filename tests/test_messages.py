from __future__ import annotations

from loot_manager.core.messages import MessageType, SimpleMessage, messages_as_markdown


def test_no_messages_is_empty() -> None:
    assert messages_as_markdown([]) == ""


def test_messages_are_prefixed_by_type() -> None:
    messages = [
        SimpleMessage(MessageType.SAY, "Sorting is up to date."),
        SimpleMessage(MessageType.WARN, "Skipping the drive at \"E:\\\"."),
        SimpleMessage(MessageType.ERROR, "None of the supported games were detected."),
    ]

    assert messages_as_markdown(messages) == (
        "## Messages\n\n"
        "- Note: Sorting is up to date.\n"
        "- Warning: Skipping the drive at \"E:\\\".\n"
        "- Error: None of the supported games were detected.\n"
    )
