"""Error taxonomy for dumpster operations.

Every failure an operation can report is a subclass of YeetError, so the
CLI can catch a single type at the per-argument boundary. Platform errors
are wrapped in IoFailure, keeping the original OSError as the cause.
"""


class YeetError(Exception):
    """Base exception for all dumpster operation failures."""

    default_message = "dumpster operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class HomeDirectoryUnavailable(YeetError):
    """Raised when the platform cannot supply a home directory."""

    default_message = "failed to get home directory"


class WorkingDirectoryUnavailable(YeetError):
    """Raised when the current working directory cannot be determined."""

    default_message = "could not determine working directory"


class AlreadyInDumpster(YeetError):
    """Raised when yeeting a path that already lives in the dumpster."""

    default_message = "cannot yeet file that is already in the dumpster"


class OutsideHomeDirectory(YeetError):
    """Raised when yeeting a path outside the home directory."""

    default_message = "cannot yeet file that is outside of the home directory"


class NotInDumpster(YeetError):
    """Raised when restoring a path that is not in the dumpster."""

    default_message = "cannot restore a file that is not in the dumpster"


class MissingFilename(YeetError):
    """Raised when a resolved path has no final filename component."""

    default_message = "could not get filename"


class DuplicateLimitExceeded(YeetError):
    """Raised when every collision suffix is already taken."""

    default_message = "max number of duplicate files reached"


class IoFailure(YeetError):
    """Wraps an OSError raised by a filesystem primitive.

    The message is the platform message verbatim.

    Attributes:
        original: The wrapped OSError.
    """

    def __init__(self, original: OSError) -> None:
        super().__init__(str(original))
        self.original = original
