"""CLI package for the view header style inspection tool."""

import logging
import sys

from calview.config import StyleConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    """Quiet wins over verbose; warnings and errors otherwise."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def _file_handler(config: StyleConfig) -> logging.Handler:
    config.log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.log_dir / config.log_filename)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: StyleConfig | None = None
) -> None:
    """Send every record to the log file and the important ones to stderr.

    Args:
        verbose: If True, show INFO records on the console
        quiet: If True, show only ERROR records on the console
        config: Optional StyleConfig for log directory/filename settings
    """
    if config is None:
        config = StyleConfig.from_env()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Calling twice (e.g. repeated CLI invocations in one process) must not
    # stack handlers or leak open log files
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(_file_handler(config))
    root_logger.addHandler(_console_handler(_console_level(verbose, quiet)))

    for name in config.ignored_env:
        root_logger.warning(f"Ignoring invalid value for {name}")


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
