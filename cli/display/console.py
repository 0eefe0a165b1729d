"""Shared Rich console for style inspection output."""

from rich.console import Console

# Every renderer prints through this console so tests can capture it
console = Console()
