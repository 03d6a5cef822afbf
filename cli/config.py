import aiohttp
import asyncio
import click
import json
import logging

from typing import Any, Awaitable, Callable, Optional

from src.adapters.discord_adapter.channel import TextChannel
from src.adapters.discord_adapter.client import Client
from src.core.utils.config import Config
from src.core.utils.exceptions import MessageStoreError
from src.core.utils.logger import setup_logging

class CliConfig:
    """Configuration loader for the CLI."""

    def __init__(self, ctx):
        self.config_path = ctx.obj["config_path"]

    def load_config(self) -> Optional[Config]:
        """Load the configuration file and set up logging."""
        config = None

        try:
            config = Config(self.config_path)
            setup_logging(config)
        except FileNotFoundError:
            click.echo(f"Configuration file not found: {self.config_path}", err=True)
            click.echo("Please pass an existing file with --config.", err=True)
        except Exception as e:
            click.echo(f"Error loading configuration: {e}", err=True)
            config = None

        return config

def run_with_channel(config: Config,
                     channel_id: str,
                     action: Callable[[TextChannel], Awaitable[Any]]) -> Any:
    """Open a REST client, build the channel and run action against it

    Args:
        config: Config instance
        channel_id: Channel ID
        action: Coroutine function called with the channel

    Returns:
        Whatever action returns
    """
    async def _run():
        async with Client(config) as client:
            return await action(TextChannel(config, client, channel_id))

    return asyncio.run(_run())

def echo_messages(ctx, config: Config, channel_id: str, action: Callable[[TextChannel], Awaitable[Any]]) -> None:
    """Run a fetch and print the resulting messages as JSON lines

    Exits with code 1 when the fetch fails.
    """
    try:
        result = run_with_channel(config, channel_id, action)
    except (MessageStoreError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logging.error(f"Fetch from channel {channel_id} failed: {e}")
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    messages = result.values() if hasattr(result, "values") else [result]
    for message in messages:
        click.echo(json.dumps(message.to_dict()))
