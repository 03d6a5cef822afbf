from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

def parse_timestamp(value: Optional[str]) -> Optional[int]:
    """Convert a Discord ISO8601 timestamp to unix seconds

    Args:
        value: Timestamp string as sent by the API

    Returns:
        Unix timestamp or None if value is empty
    """
    if not value:
        return None
    return int(datetime.fromisoformat(value).timestamp())

@dataclass(eq=False)
class Message:
    """Discord message held by a channel's message store

    message_id never changes after construction. Everything else is
    refreshed in place by patch() so that holders of a reference see
    the new content.
    """
    message_id: str
    channel: Any
    content: Optional[str] = None
    author_id: Optional[str] = None
    author_name: Optional[str] = None
    is_from_bot: bool = False
    timestamp: Optional[int] = None
    edited_timestamp: Optional[int] = None
    pinned: bool = False
    reply_to_message_id: Optional[str] = None
    attachments: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Dict[str, Any], channel: Any) -> "Message":
        """Build a message from a raw API record

        Args:
            record: Message object returned by the Discord API
            channel: Channel owning the message

        Returns:
            Message instance
        """
        message = cls(message_id=str(record["id"]), channel=channel)
        message.patch(record)
        return message

    @property
    def id(self) -> str:
        return self.message_id

    @property
    def channel_id(self) -> Optional[str]:
        return getattr(self.channel, "channel_id", None)

    @property
    def edited(self) -> bool:
        return self.edited_timestamp is not None

    def patch(self, record: Dict[str, Any]) -> None:
        """Refresh content from a raw API record

        Fields missing from the record keep their current value.

        Args:
            record: Message object returned by the Discord API
        """
        if "content" in record:
            self.content = record["content"]

        if "author" in record and record["author"]:
            author = record["author"]
            self.author_id = str(author.get("id")) if author.get("id") is not None else None
            self.author_name = author.get("global_name") or author.get("username")
            self.is_from_bot = bool(author.get("bot", False))

        if "timestamp" in record:
            self.timestamp = parse_timestamp(record["timestamp"])
        if "edited_timestamp" in record:
            self.edited_timestamp = parse_timestamp(record["edited_timestamp"])
        if "pinned" in record:
            self.pinned = bool(record["pinned"])

        reference = record.get("message_reference") or {}
        if reference.get("message_id"):
            self.reply_to_message_id = str(reference["message_id"])

        if "attachments" in record:
            self.attachments = [
                {
                    "attachment_id": str(attachment.get("id")),
                    "filename": attachment.get("filename"),
                    "size": attachment.get("size"),
                    "url": attachment.get("url")
                }
                for attachment in record["attachments"] or []
            ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for CLI output"""
        return {
            "message_id": self.message_id,
            "channel_id": self.channel_id,
            "sender": {
                "user_id": self.author_id,
                "display_name": self.author_name
            },
            "text": self.content,
            "timestamp": self.timestamp,
            "edited": self.edited,
            "pinned": self.pinned,
            "reply_to_message_id": self.reply_to_message_id,
            "attachments": self.attachments
        }
