"""Filename classification for template assets.

Generated preview thumbnails are named ``tpl`` followed by a 13-digit
millisecond timestamp (e.g. ``tpl1700000000000.png``). Every other PNG
is treated as an original template asset.
"""

import re

from tplsync.sync.models import Classification

IMAGE_EXTENSION = ".png"

# Full-name match; [0-9] rather than \d so non-ASCII digits never qualify.
EPHEMERAL_PATTERN: re.Pattern[str] = re.compile(r"tpl[0-9]{13}\.png")


def is_ephemeral_name(name: str) -> bool:
    """Check if a filename is a generated preview thumbnail.

    Args:
        name: Base filename (no directory component).

    Returns:
        True if the whole name matches ``tpl`` + 13 digits + ``.png``.
    """
    return EPHEMERAL_PATTERN.fullmatch(name) is not None


def classify(name: str, extension: str) -> Classification:
    """Classify a file by its name and extension.

    The extension check is case-insensitive, the ephemeral pattern is not:
    ``tpl1234567890123.PNG`` is a candidate.

    Args:
        name: Base filename.
        extension: Suffix from the final dot of the name.

    Returns:
        IGNORED for non-PNG files, EPHEMERAL for generated previews,
        CANDIDATE for everything else.
    """
    if extension.lower() != IMAGE_EXTENSION:
        return Classification.IGNORED

    if is_ephemeral_name(name):
        return Classification.EPHEMERAL

    return Classification.CANDIDATE
