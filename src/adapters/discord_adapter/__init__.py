"""Discord adapter implementation."""

from src.adapters.discord_adapter.channel import TextChannel
from src.adapters.discord_adapter.client import Client

__all__ = [
    "Client",
    "TextChannel"
]
