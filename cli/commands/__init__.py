"""Message store CLI commands"""

from cli.commands.fetch_cmd import fetch
from cli.commands.pins_cmd import pins

__all__ = [
    "fetch",
    "pins"
]
