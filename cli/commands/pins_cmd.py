"""
Pins command for message-store CLI.

Lists pinned messages of a channel.
"""

import click

from cli.config import CliConfig, echo_messages

@click.command(name="pins")
@click.argument("channel_id")
@click.pass_context
def pins(ctx, channel_id):
    """Fetch the pinned messages of a channel."""
    config = CliConfig(ctx).load_config()
    if not config:
        ctx.exit(1)

    echo_messages(ctx, config, channel_id, lambda channel: channel.messages.fetch_pinned())
