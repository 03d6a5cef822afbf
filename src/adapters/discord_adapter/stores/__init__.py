"""Discord stores implementation."""

from src.adapters.discord_adapter.stores.message_store import MessageStore
from src.adapters.discord_adapter.stores.selectors import (
    ChannelLogsQuery,
    FetchBatch,
    FetchSingle,
    MessageSelector,
    to_selector
)

__all__ = [
    "ChannelLogsQuery",
    "FetchBatch",
    "FetchSingle",
    "MessageSelector",
    "MessageStore",
    "to_selector"
]
