"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from tplsync.core.theme import get_theme

def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None

# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())

def configure_logging(verbose: bool = False) -> None:
    """Route tplsync log records to stderr through Rich when verbose.

    Without ``verbose`` no handler prints records; per-file failures are
    already reported by the command output.

    Args:
        verbose: Show debug records from every tplsync module.
    """
    logger = logging.getLogger("tplsync")
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        # keeps records away from logging.lastResort
        logger.addHandler(logging.NullHandler())

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    if not verbose:
        logger.setLevel(logging.WARNING)
        for handler in rich_handlers:
            logger.removeHandler(handler)
        return

    logger.setLevel(logging.DEBUG)
    if not rich_handlers:
        logger.addHandler(RichHandler(console=err_console, show_path=True, markup=False))

def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]", soft_wrap=True)

def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}", soft_wrap=True)

def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]", soft_wrap=True)
