"""CLI commands for tplsync.

This package contains all subcommand implementations.
"""

from tplsync.cli.commands import config, scan, sync

__all__ = ["config", "scan", "sync"]
