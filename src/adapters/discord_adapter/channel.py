from typing import Any, Optional

from src.adapters.discord_adapter.stores.message_store import MessageStore
from src.core.utils.config import Config

class TextChannel:
    """Discord text channel owning a message store"""

    def __init__(self,
                 config: Config,
                 client: Any,
                 channel_id: str,
                 channel_name: Optional[str] = None,
                 guild_id: Optional[str] = None):
        """Initialize the TextChannel

        Args:
            config: Config instance
            client: Discord REST client
            channel_id: Channel ID
            channel_name: Channel name
            guild_id: ID of the guild the channel belongs to
        """
        self.config = config
        self.client = client
        self.channel_id = str(channel_id)
        self.channel_name = channel_name
        self.guild_id = guild_id
        self.messages = MessageStore(self.config, self.client, self)

    async def fetch_pinned(self, overwrite: bool = False):
        """Shortcut for messages.fetch_pinned()"""
        return await self.messages.fetch_pinned(overwrite)

    def __repr__(self) -> str:
        return f"TextChannel(channel_id={self.channel_id!r}, cached_messages={len(self.messages)})"
