"""tplsync - Prune generated previews and promote templates into a flat library."""

__version__ = "0.1.0"
