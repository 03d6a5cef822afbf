import click

from cli.commands.fetch_cmd import fetch
from cli.commands.pins_cmd import pins

@click.group()
@click.option(
    "--config",
    "config_path",
    default="config.yaml",
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Path to the YAML configuration file."
)
@click.pass_context
def cli(ctx, config_path):
    """Inspect Discord channels through the message store.

    Messages are fetched from the Discord REST API through a channel's
    message store and printed as JSON lines.

    Configuration is read from the YAML file given with --config.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

# Register subcommands
cli.add_command(fetch)
cli.add_command(pins)

def main():
    """Entry point for the message-store command."""
    cli()

if __name__ == "__main__":
    main()
