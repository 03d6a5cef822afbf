import aiohttp
import logging

from typing import Any, Dict, List, Optional

from src.core.rate_limiter.rate_limiter import RateLimiter
from src.core.utils.config import Config
from src.core.utils.exceptions import (
    ConfigurationError, NotFoundError, RateLimitedError, TransportError
)

class Client:
    """Discord REST client used by message stores"""

    def __init__(self, config: Config):
        """Initialize the Discord REST client

        Args:
            config (Config): The configuration for the Discord client
        """
        self.config = config
        self.api_url = self.config.get_api_url()
        self.request_timeout = self.config.get_setting("adapter", "request_timeout", 30)
        self.rate_limiter = RateLimiter.get_instance(self.config)
        self.session: Optional[aiohttp.ClientSession] = None

    async def connect(self) -> None:
        """Open the HTTP session"""
        if not self.config.get_token():
            raise ConfigurationError("Setting 'bot_token' is required to call the Discord API")

        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.request_timeout)
            )
            logging.info(f"Discord REST client session opened for {self.api_url}")

    async def disconnect(self) -> None:
        """Close the HTTP session"""
        if self.session and not self.session.closed:
            await self.session.close()
            logging.info("Discord REST client session closed")
        self.session = None

    async def __aenter__(self) -> "Client":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    async def get_channel_message(self, channel_id: str, message_id: str) -> Dict[str, Any]:
        """GET /channels/{channel_id}/messages/{message_id}

        Args:
            channel_id: Channel ID
            message_id: Message ID

        Returns:
            Raw message record
        """
        return await self._get(
            "fetch_message", channel_id, f"/channels/{channel_id}/messages/{message_id}"
        )

    async def get_channel_messages(self,
                                   channel_id: str,
                                   params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """GET /channels/{channel_id}/messages

        Args:
            channel_id: Channel ID
            params: Query parameters (limit, before, after, around)

        Returns:
            Raw message records in the order the API sent them
        """
        return await self._get(
            "fetch_messages", channel_id, f"/channels/{channel_id}/messages", params or {}
        )

    async def get_pinned_messages(self, channel_id: str) -> List[Dict[str, Any]]:
        """GET /channels/{channel_id}/pins

        Args:
            channel_id: Channel ID

        Returns:
            Raw message records in the order the API sent them
        """
        return await self._get("fetch_pins", channel_id, f"/channels/{channel_id}/pins")

    async def _get(self,
                   request_type: str,
                   channel_id: str,
                   path: str,
                   params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a rate limited GET request to the API

        Args:
            request_type: Request type passed to the rate limiter
            channel_id: Channel ID for per-channel limits
            path: Path relative to the API URL
            params: Query parameters

        Returns:
            Decoded JSON body
        """
        if self.session is None or self.session.closed:
            await self.connect()

        await self.rate_limiter.limit_request(request_type, channel_id)

        url = f"{self.api_url}{path}"
        response = await self.session.get(
            url,
            params=params or None,
            headers={"Authorization": f"Bot {self.config.get_token()}"}
        )
        await self._check_api_response(response, url)
        return await response.json()

    async def _check_api_response(self, response: Any, url: str) -> None:
        """Raise a TransportError subclass for error statuses

        Args:
            response: aiohttp response
            url: Requested URL
        """
        if response.status < 400:
            return

        text = await response.text()
        logging.error(f"Discord API request to {url} failed with status {response.status}: {text}")

        if response.status == 404:
            raise NotFoundError(response.status, text, url)

        if response.status == 429:
            retry_after = float(response.headers.get("Retry-After", 1))
            self.rate_limiter.block_for(retry_after)
            raise RateLimitedError(response.status, text, url, retry_after=retry_after)

        raise TransportError(response.status, text, url)
