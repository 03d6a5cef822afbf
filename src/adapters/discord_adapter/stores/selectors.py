from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional, Union

class ChannelLogsQuery(BaseModel):
    """Query parameters for fetching several messages of a channel

    around, before and after are mutually exclusive for the API,
    this model does not check it.
    """
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    before: Optional[str] = None
    after: Optional[str] = None
    around: Optional[str] = None

    @field_validator("before", "after", "around", mode="before")
    @classmethod
    def snowflake_to_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) and not isinstance(value, bool) else value

    def to_params(self) -> Dict[str, Any]:
        """Query string parameters, only the ones that are set"""
        return self.model_dump(exclude_none=True)

class FetchSingle(BaseModel):
    """Fetch one message by ID"""
    message_id: str = Field(min_length=1)

    @field_validator("message_id", mode="before")
    @classmethod
    def snowflake_to_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) and not isinstance(value, bool) else value

class FetchBatch(BaseModel):
    """Fetch a page of messages matching a query"""
    query: ChannelLogsQuery = Field(default_factory=ChannelLogsQuery)

MessageSelector = Union[FetchSingle, FetchBatch]

def to_selector(value: Any) -> MessageSelector:
    """Normalise what callers pass to fetch() into a selector

    Args:
        value: FetchSingle, FetchBatch, message ID (str or int),
               ChannelLogsQuery, dict of query options or None

    Returns:
        FetchSingle or FetchBatch

    Raises:
        TypeError: If value cannot be turned into a selector
    """
    if isinstance(value, (FetchSingle, FetchBatch)):
        return value
    if value is None:
        return FetchBatch()
    if isinstance(value, bool):
        raise TypeError(f"Cannot fetch messages with selector of type {type(value).__name__}")
    if isinstance(value, (str, int)):
        return FetchSingle(message_id=value)
    if isinstance(value, ChannelLogsQuery):
        return FetchBatch(query=value)
    if isinstance(value, dict):
        return FetchBatch(query=ChannelLogsQuery(**value))
    raise TypeError(f"Cannot fetch messages with selector of type {type(value).__name__}")
