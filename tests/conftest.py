import copy
import os
import pytest
import sys
import yaml

from unittest.mock import AsyncMock, MagicMock, mock_open, patch

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from src.core.rate_limiter.rate_limiter import RateLimiter
from src.core.utils.config import Config

@pytest.fixture
def basic_config_data():
    """Base configuration data that the tests extend"""
    return {
        "adapter": {
            "bot_token": "test_bot_token",
            "api_url": "https://discord.test/api/v10",
            "request_timeout": 5
        },
        "caching": {
            "message_cache_max_size": 3
        },
        "rate_limit": {
            "global_rpm": 120,
            "per_channel_rpm": 60
        },
        "logging": {
            "logging_level": "INFO",
            "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "log_file_path": "test.log",
            "max_log_size": 1024,
            "backup_count": 3
        }
    }

@pytest.fixture
def mock_config_factory():
    """Factory fixture to create Config mocks with specified data"""
    def _create_config(config_data):
        with patch("builtins.open", mock_open(read_data=yaml.dump(config_data))):
            with patch("os.path.exists", return_value=True):
                return Config()
    return _create_config

@pytest.fixture
def discord_config(basic_config_data, mock_config_factory):
    """Mocked Config instance for Discord tests"""
    return mock_config_factory(copy.deepcopy(basic_config_data))

@pytest.fixture
def config_with_cache_size(basic_config_data, mock_config_factory):
    """Factory for Config instances with a given message cache size"""
    def _create_config(max_size):
        config = copy.deepcopy(basic_config_data)
        config["caching"]["message_cache_max_size"] = max_size
        return mock_config_factory(config)
    return _create_config

@pytest.fixture(scope="function", autouse=True)
def rate_limiter_singleton():
    """Reset the RateLimiter singleton around every test"""
    original_instance = RateLimiter._instance
    RateLimiter._instance = None

    yield

    RateLimiter._instance = original_instance

@pytest.fixture
def rate_limiter_mock():
    """Create a mock rate limiter"""
    rate_limiter = AsyncMock()
    rate_limiter.limit_request = AsyncMock(return_value=None)
    rate_limiter.get_wait_time = AsyncMock(return_value=0)
    rate_limiter.block_for = MagicMock()
    return rate_limiter

@pytest.fixture
def message_record_factory():
    """Factory for raw message records as returned by the Discord API"""
    def _create_record(message_id, content=None, **overrides):
        record = {
            "id": str(message_id),
            "channel_id": "222079895583457280",
            "content": content if content is not None else f"Message {message_id}",
            "author": {
                "id": "53908232506183680",
                "username": "mason",
                "global_name": "Mason",
                "bot": False
            },
            "timestamp": "2024-01-15T10:30:00.000000+00:00",
            "edited_timestamp": None,
            "pinned": False,
            "attachments": []
        }
        record.update(overrides)
        return record
    return _create_record
