"""Util functions and classes implementation."""

from src.core.utils.config import Config
from src.core.utils.exceptions import (
    ConfigurationError,
    MessageStoreError,
    NotFoundError,
    RateLimitedError,
    TransportError
)
from src.core.utils.logger import setup_logging

__all__ = [
    "Config",
    "ConfigurationError",
    "MessageStoreError",
    "NotFoundError",
    "RateLimitedError",
    "TransportError",
    "setup_logging"
]
