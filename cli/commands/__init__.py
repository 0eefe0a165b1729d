"""CLI commands package."""

from cli.commands.compare import compare
from cli.commands.config import config
from cli.commands.show import show

__all__ = [
    "compare",
    "config",
    "show",
]
