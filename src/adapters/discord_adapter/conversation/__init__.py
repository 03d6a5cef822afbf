"""Discord message data classes."""

from src.adapters.discord_adapter.conversation.data_classes import Message, parse_timestamp

__all__ = [
    "Message",
    "parse_timestamp"
]
