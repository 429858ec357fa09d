"""Allow running tplsync as ``python -m tplsync``."""

from tplsync.cli.main import app

if __name__ == "__main__":
    app()
