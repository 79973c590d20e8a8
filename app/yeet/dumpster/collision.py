"""Collision-free filename selection for the dumpster.

Names are chosen deterministically: the original name if it is free,
otherwise the first of ``name.0``, ``name.1``, ... that is free.

The check and the later rename are not atomic. Another process creating
the chosen name in between will be clobbered or cause the move to fail.
"""

import logging
from pathlib import Path

from yeet.core.config import MAX_DUPLICATES
from yeet.core.errors import DuplicateLimitExceeded

logger = logging.getLogger(__name__)


def is_occupied(path: Path) -> bool:
    """Check whether anything, including a dangling symlink, exists at path."""
    return path.exists() or path.is_symlink()


def resolve_filename(
    original_name: str,
    destination_dir: Path,
    max_duplicates: int = MAX_DUPLICATES,
) -> str:
    """Find a filename that is free in the destination directory.

    Args:
        original_name: Filename of the entry being moved.
        destination_dir: Directory the entry is moved into.
        max_duplicates: Number of numeric suffixes to probe.

    Returns:
        ``original_name`` if free, otherwise ``original_name.<n>`` for the
        smallest free ``n``.

    Raises:
        DuplicateLimitExceeded: If every suffix up to ``max_duplicates`` is taken.
    """
    if not is_occupied(destination_dir / original_name):
        return original_name

    for n in range(max_duplicates):
        candidate = f"{original_name}.{n}"
        if not is_occupied(destination_dir / candidate):
            logger.debug("%s is taken in %s, using %s", original_name, destination_dir, candidate)
            return candidate

    raise DuplicateLimitExceeded()
