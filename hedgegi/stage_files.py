"""Output directory handling for baked stage data."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_CLEANED_EXTENSIONS = frozenset({".png", ".dds", ".lft", ".shlf", ".mti"})


def validate_output_directory(path, create: bool) -> bool:
    """Optionally create the output directory, then report whether it exists."""
    path = Path(path)
    if create:
        try:
            path.mkdir()
        except OSError:
            pass
    if path.exists():
        return True
    logger.error("Unable to locate output directory path")
    return False


def clean_output_directory(path) -> list:
    """Delete baked output files from the directory; return the names deleted."""
    if not validate_output_directory(path, False):
        return []

    removed = []
    for entry in sorted(Path(path).iterdir()):
        if not entry.is_file() or entry.suffix.lower() not in _CLEANED_EXTENSIONS:
            continue
        entry.unlink()
        logger.info("Deleted %s", entry.name)
        removed.append(entry.name)
    return removed