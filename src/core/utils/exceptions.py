"""Errors raised by the message store and its transport.

Only HTTP failures are wrapped. Network errors raised by aiohttp
(``aiohttp.ClientError``, ``asyncio.TimeoutError``) reach the caller as they are.
"""

from typing import Optional


class MessageStoreError(Exception):
    """Base class for message store errors"""


class ConfigurationError(MessageStoreError):
    """Required setting is missing or invalid"""


class TransportError(MessageStoreError):
    """Discord API answered with an error status"""

    def __init__(self, status: int, message: str, url: Optional[str] = None) -> None:
        self.status = status
        self.message = message
        self.url = url
        super().__init__(f"[{status}] {message}" + (f" ({url})" if url else ""))


class NotFoundError(TransportError):
    """Requested channel or message does not exist"""


class RateLimitedError(TransportError):
    """Request was rejected by the API rate limit"""

    def __init__(self,
                 status: int,
                 message: str,
                 url: Optional[str] = None,
                 retry_after: Optional[float] = None) -> None:
        self.retry_after = retry_after
        super().__init__(status, message, url)
