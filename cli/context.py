"""Shared CLI context with lazy-initialized dependencies."""

from calview.config import StyleConfig


class CLIContext:
    """Shared context for CLI commands.

    Usage:
        ctx = CLIContext()
        fmt = ctx.config.display_format
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        self._config: StyleConfig | None = None

    @property
    def config(self) -> StyleConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = StyleConfig.from_env()
        return self._config


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
