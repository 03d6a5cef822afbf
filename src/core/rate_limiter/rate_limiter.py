import asyncio
import time
import logging
from typing import Dict, Optional
from src.core.utils.config import Config

class RateLimiter:
    """Rate limiter for API requests"""

    _instance = None

    @classmethod
    def get_instance(cls, config: Config):
        """Get or create the singleton instance

        Args:
            config: Configuration object (only used during first initialization)

        Returns:
            The singleton RateLimiter instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    def __init__(self, config: Config):
        """Initialize the rate limiter

        Args:
            config: Configuration object
        """
        self.config = config

        # Requests per minute globally
        self.global_rpm = self.config.get_setting("rate_limit", "global_rpm", 120)
        # Requests per minute per channel
        self.per_channel_rpm = self.config.get_setting("rate_limit", "per_channel_rpm", 60)

        # Tracking state
        self.last_global_request = 0
        self.last_channel_requests: Dict[str, float] = {}
        self.blocked_until = 0

    async def get_wait_time(self,
                            request_type: str,
                            channel_id: Optional[str] = None) -> float:
        """Get the wait time before making a request

        Args:
            request_type: Type of request (fetch_message, fetch_messages, fetch_pins)
            channel_id: Channel ID for per-channel limits

        Returns:
            Wait time in seconds
        """
        try:
            current_time = time.time()
            wait_times = [max(0, self.blocked_until - current_time)]

            global_time_since = current_time - self.last_global_request
            wait_times.append(max(0, (60 / self.global_rpm) - global_time_since))

            if channel_id:
                channel_time_since = current_time - self.last_channel_requests.get(channel_id, 0)
                wait_times.append(max(0, (60 / self.per_channel_rpm) - channel_time_since))

            return max(wait_times)
        except Exception as e:
            logging.error(f"Error calculating wait time for {request_type}: {e}")
            return 1.0

    async def limit_request(self,
                            request_type: str,
                            channel_id: Optional[str] = None) -> None:
        """Apply rate limiting before making a request

        Args:
            request_type: Type of request (fetch_message, fetch_messages, fetch_pins)
            channel_id: Channel ID for per-channel limits
        """
        wait_time = await self.get_wait_time(request_type, channel_id)

        if wait_time > 0:
            logging.debug(f"Rate limiting {request_type}: waiting {wait_time:.2f} seconds")
            await asyncio.sleep(wait_time)

        current_time = time.time()
        self.last_global_request = current_time

        self._forget_idle_channels(current_time)
        if channel_id:
            self.last_channel_requests[channel_id] = current_time

    def _forget_idle_channels(self, current_time: float) -> None:
        """Drop channels whose last request no longer delays the next one"""
        if self.per_channel_rpm <= 0:
            return

        interval = 60 / self.per_channel_rpm
        self.last_channel_requests = {
            channel_id: last_request
            for channel_id, last_request in self.last_channel_requests.items()
            if current_time - last_request < interval
        }

    def block_for(self, seconds: float) -> None:
        """Hold back every following request for the given time

        Args:
            seconds: Delay reported by the API in a 429 response
        """
        self.blocked_until = max(self.blocked_until, time.time() + seconds)
        logging.warning(f"API rate limit hit, blocking requests for {seconds:.2f} seconds")
