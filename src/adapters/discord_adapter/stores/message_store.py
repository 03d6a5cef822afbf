import logging

from typing import Any, Dict, Iterable, List, Optional, Union

from src.adapters.discord_adapter.conversation.data_classes import Message
from src.adapters.discord_adapter.stores.selectors import FetchBatch, FetchSingle, to_selector
from src.core.cache.bounded_cache import BoundedOrderedCache
from src.core.cache.collection import Collection
from src.core.utils.config import Config

DEFAULT_MESSAGE_CACHE_MAX_SIZE = 200

class MessageStore:
    """Stores messages of a single text channel

    Messages are kept in insertion order and the oldest one is evicted
    when the configured maximum is reached. Messages missing from the
    store can be fetched from the Discord API.

    caching.message_cache_max_size: a missing key means 200, null or a
    negative value means unbounded, 0 disables caching.
    """

    def __init__(self,
                 config: Config,
                 client: Any,
                 channel: Any,
                 iterable: Optional[Iterable[Union[Dict[str, Any], Message]]] = None):
        """Initialize the MessageStore

        Args:
            config: Config instance
            client: Discord REST client
            channel: Channel owning the store
            iterable: Optional records or messages to populate the store with
        """
        self.config = config
        self.client = client
        self.channel = channel
        self.cache = BoundedOrderedCache(
            self.config.get_setting(
                "caching", "message_cache_max_size", DEFAULT_MESSAGE_CACHE_MAX_SIZE
            )
        )

        for item in iterable or []:
            self.add(item)

    @property
    def max_size(self) -> Optional[int]:
        return self.cache.max_size

    @max_size.setter
    def max_size(self, value: Optional[int]) -> None:
        self.cache.max_size = value

    @property
    def size(self) -> int:
        return self.cache.size

    def add(self,
            data: Union[Dict[str, Any], Message],
            channel: Optional[Any] = None,
            cache: bool = True) -> Message:
        """Add a message to the store

        A message that is already cached is returned as it is, without
        refreshing its content.

        Args:
            data: Raw API record or Message instance
            channel: Channel owning the message, defaults to the store's channel
            cache: Whether to keep the message in the store

        Returns:
            Message instance
        """
        message_id = data.message_id if isinstance(data, Message) else str(data["id"])
        existing = self.cache.get(message_id)
        if existing:
            return existing

        message = data if isinstance(data, Message) else Message.from_record(data, channel or self.channel)
        if cache:
            self.set(message_id, message)
        return message

    def set(self, message_id: Union[str, int], message: Message) -> None:
        key = self.resolve_id(message_id)
        if key is None:
            raise TypeError(f"Invalid message ID: {message_id!r}")
        self.cache.set(key, message)

    def get(self, message_id: Union[str, int]) -> Optional[Message]:
        return self.cache.get(self.resolve_id(message_id))

    def delete(self, message_id: Union[str, int]) -> bool:
        return self.cache.delete(self.resolve_id(message_id))

    def first_key(self) -> Optional[str]:
        return self.cache.first_key()

    async def fetch(self, message: Any = None, overwrite: bool = False) -> Union[Message, Collection]:
        """Fetch a message, or a page of messages, from the channel

        Args:
            message: Message ID or FetchSingle to get one message;
                     ChannelLogsQuery, dict of query options, FetchBatch
                     or None to get several
            overwrite: Whether to refresh messages that are already cached

        Returns:
            Message for a single ID, otherwise Collection of ID -> Message
            in the order the API returned them
        """
        selector = to_selector(message)

        if isinstance(selector, FetchSingle):
            return await self._fetch_id(selector.message_id, overwrite)
        return await self._fetch_many(selector, overwrite)

    async def fetch_pinned(self, overwrite: bool = False) -> Collection:
        """Fetch the pinned messages of the channel

        Args:
            overwrite: Whether to refresh messages that are already cached

        Returns:
            Collection of ID -> Message
        """
        logging.info(f"Fetching pinned messages of channel {self.channel.channel_id}")

        data = await self.client.get_pinned_messages(self.channel.channel_id)
        return self._add_many(data, overwrite)

    def resolve(self, message: Any) -> Optional[Message]:
        """Resolve a message or message ID to a cached Message

        Args:
            message: Message instance or message ID

        Returns:
            Message or None if it is not cached
        """
        if isinstance(message, Message):
            return message
        if isinstance(message, (str, int)) and not isinstance(message, bool):
            return self.cache.get(str(message))
        return None

    def resolve_id(self, message: Any) -> Optional[str]:
        """Resolve a message or message ID to a message ID

        Args:
            message: Message instance or message ID

        Returns:
            Message ID or None
        """
        if isinstance(message, Message):
            return message.message_id
        if isinstance(message, (str, int)) and not isinstance(message, bool):
            return str(message)
        return None

    async def _fetch_id(self, message_id: str, overwrite: bool) -> Message:
        """Fetch a single message

        The API is called even when the message is cached.

        Args:
            message_id: Message ID
            overwrite: Whether to refresh the cached message

        Returns:
            Message instance
        """
        existing = self.cache.get(message_id)
        logging.info(
            f"Fetching message {message_id} of channel {self.channel.channel_id} "\
            f"(cached=[{existing is not None}], overwrite=[{overwrite}])"
        )

        data = await self.client.get_channel_message(self.channel.channel_id, message_id)
        if existing and overwrite:
            existing.patch(data)
        return self.add(data)

    async def _fetch_many(self, selector: FetchBatch, overwrite: bool) -> Collection:
        """Fetch several messages

        Args:
            selector: FetchBatch with the query to send
            overwrite: Whether to refresh cached messages

        Returns:
            Collection of ID -> Message
        """
        params = selector.query.to_params()
        logging.info(f"Fetching messages of channel {self.channel.channel_id} with params {params}")

        data = await self.client.get_channel_messages(self.channel.channel_id, params)
        return self._add_many(data, overwrite)

    def _add_many(self, data: List[Dict[str, Any]], overwrite: bool) -> Collection:
        """Merge fetched records into the store

        Args:
            data: Raw message records
            overwrite: Whether to refresh cached messages

        Returns:
            Collection of ID -> Message in record order
        """
        messages = Collection()

        for record in data:
            existing = self.cache.get(str(record["id"]))
            if existing and overwrite:
                existing.patch(record)
            message = self.add(record)
            messages.set(message.message_id, message)

        logging.debug(f"Merged {len(messages)} messages, store size is now {self.cache.size}")
        return messages

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, message_id: Union[str, int]) -> bool:
        return self.resolve_id(message_id) in self.cache

    def __iter__(self):
        return iter(self.cache.values())
