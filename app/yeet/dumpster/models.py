"""Dumpster domain models.

This module defines the verbs the dumpster understands, the per-item
result reported back to the CLI, and the entries listed from the
dumpster tree.
"""

from dataclasses import dataclass
from enum import Enum


class Verb(str, Enum):
    """Operation requested by the caller.

    Attributes:
        YEET: Move a path into the dumpster.
        RESTORE: Move a path out of the dumpster to its mirrored home location.
        EMPTY: Permanently delete everything in the dumpster.
    """

    YEET = "yeet"
    RESTORE = "restore"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class DumpsterActionResult:
    """Result of a single dumpster operation.

    Attributes:
        argument: The path string as supplied by the caller, or the entry
            name for EMPTY.
        verb: Operation that was attempted.
        success: Whether the operation completed successfully.
        destination: Where the path ended up, None on failure or for EMPTY.
        error: Error message if the operation failed, None otherwise.
    """

    argument: str
    verb: Verb
    success: bool
    destination: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class DumpsterEntry:
    """A leaf of the dumpster tree.

    Attributes:
        dumpster_path: Absolute path inside the dumpster.
        original_path: Home path a restore would move the entry to.
        is_dir: Whether the entry is an (empty) directory.
        size_bytes: Size in bytes for regular files, None otherwise.
    """

    dumpster_path: str
    original_path: str
    is_dir: bool = False
    size_bytes: int | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.dumpster_path:
            msg = "Dumpster path cannot be empty"
            raise ValueError(msg)
