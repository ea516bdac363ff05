"""Logging configuration for ouroboros CLI.

Logs and per-file progress bars share one stderr console so log lines
render above the bars. Results printed by OutputContext go to stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that stay at WARNING unless --debug is given
NOISY_LOGGERS = ("asyncio", "concurrent.futures")


def resolve_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> int:
    """Pick the root log level. Precedence: quiet > debug > verbosity."""
    if quiet:
        return logging.WARNING
    if debug or verbosity >= 1:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    debug: bool = False,
) -> Console:
    """Install a RichHandler on stderr.

    Args:
        verbosity: Number of -v flags (1+ shows per-file skip decisions)
        quiet: Only warnings and errors
        no_color: Disable colored output
        debug: Debug level with timestamps and source locations, including
            asyncio and thread pool internals

    Returns:
        The stderr console, shared with progress bars
    """
    console = Console(stderr=True, force_terminal=not no_color, no_color=no_color)
    handler = RichHandler(
        console=console,
        show_time=debug,
        show_path=debug,
        rich_tracebacks=debug,
    )
    logging.basicConfig(
        level=resolve_level(verbosity, quiet, debug),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    noisy_level = logging.DEBUG if debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    return console
