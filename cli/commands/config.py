"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from calview.config import StyleConfig
from cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(cfg: StyleConfig, env_key: str) -> str:
    """Determine the source of a config value."""
    if env_key in cfg.ignored_env:
        return "env (invalid, ignored)"
    if env_key in os.environ:
        return "env"
    return "default"


def config() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()
    cfg = StyleConfig.from_env()

    rows = [
        ("log_dir", str(cfg.log_dir.resolve()), _get_source(cfg, "CALVIEW_LOG_DIR")),
        ("log_filename", cfg.log_filename, _get_source(cfg, "CALVIEW_LOG_FILENAME")),
        (
            "display_format",
            cfg.display_format,
            _get_source(cfg, "CALVIEW_DISPLAY_FORMAT"),
        ),
        (
            "show_defaults",
            str(cfg.show_defaults).lower(),
            _get_source(cfg, "CALVIEW_SHOW_DEFAULTS"),
        ),
    ]

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    console.print("\n[bold]Settings:[/bold]")
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", no_wrap=True)
    table.add_column("SOURCE", style="dim", no_wrap=True)
    table.add_column("VALUE")
    for setting, value, source in rows:
        table.add_row(setting, source, value)
    console.print(table)
    console.print()
