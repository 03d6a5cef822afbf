"""
Fetch command for message-store CLI.

Fetches one message by ID, or a page of messages, from a channel.
"""

import click

from cli.config import CliConfig, echo_messages
from src.adapters.discord_adapter.stores.selectors import ChannelLogsQuery, FetchBatch, FetchSingle

@click.command(name="fetch")
@click.argument("channel_id")
@click.argument("message_id", required=False)
@click.option("--limit", type=click.IntRange(1, 100), help="Number of messages to fetch.")
@click.option("--before", help="Fetch messages posted before this message ID.")
@click.option("--after", help="Fetch messages posted after this message ID.")
@click.option("--around", help="Fetch messages posted around this message ID.")
@click.option("--overwrite", is_flag=True, help="Refresh messages that are already cached.")
@click.pass_context
def fetch(ctx, channel_id, message_id, limit, before, after, around, overwrite):
    """Fetch messages from a channel.

    If MESSAGE_ID is provided, fetches that message only.
    Otherwise, fetches a page of messages matching the options.

    \b
    Examples:
        message-store fetch 222079895583457280 1051174328458125362
        message-store fetch 222079895583457280 --limit 10 --before 1051174328458125362
    """
    config = CliConfig(ctx).load_config()
    if not config:
        ctx.exit(1)

    if message_id:
        selector = FetchSingle(message_id=message_id)
    else:
        selector = FetchBatch(
            query=ChannelLogsQuery(limit=limit, before=before, after=after, around=around)
        )

    echo_messages(
        ctx,
        config,
        channel_id,
        lambda channel: channel.messages.fetch(selector, overwrite=overwrite)
    )
