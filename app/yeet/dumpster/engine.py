"""The dumpster engine.

Moves paths under the home directory into a mirrored tree below the
dumpster root, moves them back, and empties the dumpster. The dumpster
tree is the only record of what was yeeted: a file at
``<dumpster>/a/b/c.txt`` came from ``<home>/a/b/c.txt``.
"""

import errno
import logging
import os
import shutil
from collections.abc import Callable, Iterator
from pathlib import Path

from yeet.core.config import MAX_DUPLICATES, YeetConfig
from yeet.core.errors import (
    AlreadyInDumpster,
    IoFailure,
    MissingFilename,
    NotInDumpster,
    OutsideHomeDirectory,
)
from yeet.core.paths import (
    ensure_dumpster_dir,
    get_dumpster_dir,
    get_home_dir,
    get_working_dir,
    resolve_location,
)
from yeet.dumpster.collision import is_occupied, resolve_filename
from yeet.dumpster.models import DumpsterActionResult, DumpsterEntry, Verb

logger = logging.getLogger(__name__)


class Dumpster:
    """A recoverable holding area mirroring the home directory.

    The home directory and the working directory lookup are injected so
    that callers (and tests) can run the engine against any directory tree.

    Attributes:
        _location: Absolute path to the dumpster root.
        _home: Absolute path to the home directory being mirrored.
        _cwd: Callable returning the directory relative paths resolve against.
        _max_duplicates: Number of collision suffixes to probe.
    """

    def __init__(
        self,
        location: Path,
        home: Path,
        cwd: Callable[[], Path] = get_working_dir,
        max_duplicates: int = MAX_DUPLICATES,
    ) -> None:
        """Initialize the Dumpster.

        Use :meth:`with_default_location` or :meth:`for_home` to also make
        sure the dumpster root exists.

        Args:
            location: Dumpster root directory.
            home: Home directory the dumpster mirrors.
            cwd: Working directory lookup used to resolve relative paths.
            max_duplicates: Number of collision suffixes to probe.
        """
        self._location = location
        self._home = home
        self._cwd = cwd
        self._max_duplicates = max_duplicates

    @property
    def location(self) -> Path:
        """Absolute path to the dumpster root."""
        return self._location

    @property
    def home(self) -> Path:
        """Absolute path to the mirrored home directory."""
        return self._home

    @classmethod
    def for_home(
        cls,
        home: Path,
        config: YeetConfig | None = None,
        cwd: Callable[[], Path] = get_working_dir,
    ) -> "Dumpster":
        """Create a Dumpster below ``home``, creating its root if needed.

        Args:
            home: Home directory the dumpster mirrors.
            config: Configuration to apply. If None, uses the defaults.
            cwd: Working directory lookup used to resolve relative paths.

        Returns:
            Initialized Dumpster.

        Raises:
            IoFailure: If the dumpster root cannot be created.
        """
        config = config or YeetConfig()
        location = ensure_dumpster_dir(get_dumpster_dir(home, config.dumpster_name))
        return cls(
            location=location,
            home=home,
            cwd=cwd,
            max_duplicates=config.max_duplicates,
        )

    @classmethod
    def with_default_location(cls, config: YeetConfig | None = None) -> "Dumpster":
        """Create the Dumpster for the current user.

        Args:
            config: Configuration to apply. If None, uses the defaults.

        Returns:
            Initialized Dumpster rooted at ``~/.dumpster``.

        Raises:
            HomeDirectoryUnavailable: If the home directory cannot be found.
            IoFailure: If the dumpster root cannot be created.
        """
        return cls.for_home(get_home_dir(), config)

    def yeet(self, path: str | Path) -> Path:
        """Move a path into the dumpster.

        The path is mirrored below the dumpster root relative to the home
        directory. Missing directories are created and a clashing leaf name
        gets the first free ``.0``, ``.1``, ... suffix.

        Args:
            path: Relative or absolute path to yeet.

        Returns:
            Where the path now lives inside the dumpster.

        Raises:
            WorkingDirectoryUnavailable: If a relative path cannot be resolved.
            AlreadyInDumpster: If the path is inside the dumpster.
            OutsideHomeDirectory: If the path is not inside the home directory.
            MissingFilename: If the path is the home directory itself.
            DuplicateLimitExceeded: If no collision suffix is free.
            IoFailure: If creating directories or moving fails.
        """
        absolute_path = resolve_location(path, self._cwd())

        if absolute_path.is_relative_to(self._location):
            raise AlreadyInDumpster()
        if not absolute_path.is_relative_to(self._home):
            raise OutsideHomeDirectory()

        path_suffix = absolute_path.relative_to(self._home)
        if not path_suffix.parts:
            raise MissingFilename()
        destination_dir = (self._location / path_suffix).parent

        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IoFailure(e) from e

        destination = destination_dir / resolve_filename(
            absolute_path.name, destination_dir, self._max_duplicates
        )

        self._move(absolute_path, destination)
        logger.info("Yeeted %s to %s", absolute_path, destination)
        return destination

    def restore(self, path: str | Path) -> Path:
        """Move a path out of the dumpster to its mirrored home location.

        Unlike :meth:`yeet`, no collision suffix is chosen and no missing
        directories are recreated: an occupied target or a missing parent
        directory fails the restore.

        Args:
            path: Relative or absolute path inside the dumpster.

        Returns:
            Where the path now lives below the home directory.

        Raises:
            WorkingDirectoryUnavailable: If a relative path cannot be resolved.
            NotInDumpster: If the path is not inside the dumpster.
            IoFailure: If the target is occupied or moving fails.
        """
        absolute_path = resolve_location(path, self._cwd())

        if not absolute_path.is_relative_to(self._location):
            raise NotInDumpster()

        target = self._home / absolute_path.relative_to(self._location)
        if is_occupied(target):
            raise IoFailure(FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(target)))

        self._move(absolute_path, target)
        logger.info("Restored %s to %s", absolute_path, target)
        return target

    def empty(self) -> list[DumpsterActionResult]:
        """Permanently delete every entry in the dumpster.

        Entries are removed one by one; a failure is recorded and the
        remaining entries are still processed.

        Returns:
            One DumpsterActionResult per top-level dumpster entry.

        Raises:
            IoFailure: If the dumpster root cannot be listed.
        """
        try:
            entries = sorted(self._location.iterdir())
        except OSError as e:
            raise IoFailure(e) from e

        results: list[DumpsterActionResult] = []
        for entry in entries:
            try:
                # Directories (but not symlinks to directories)
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            except OSError as e:
                logger.debug("Failed to remove %s: %s", entry, e)
                results.append(
                    DumpsterActionResult(
                        argument=entry.name,
                        verb=Verb.EMPTY,
                        success=False,
                        error=str(e),
                    )
                )
                continue

            logger.info("Removed %s", entry)
            results.append(DumpsterActionResult(argument=entry.name, verb=Verb.EMPTY, success=True))

        return results

    def contents(self) -> list[DumpsterEntry]:
        """List the leaves of the dumpster tree.

        Leaves are files, symlinks and empty directories. Each is paired with
        the home path a restore would move it to.

        Returns:
            DumpsterEntry list sorted by dumpster path.

        Raises:
            IoFailure: If part of the dumpster tree cannot be listed.
        """
        try:
            leaves = list(self._walk(self._location))
        except OSError as e:
            raise IoFailure(e) from e

        entries: list[DumpsterEntry] = []
        for leaf in leaves:
            is_dir = leaf.is_dir() and not leaf.is_symlink()
            size: int | None = None
            if leaf.is_file() and not leaf.is_symlink():
                try:
                    size = leaf.stat().st_size
                except OSError:
                    size = None
            entries.append(
                DumpsterEntry(
                    dumpster_path=str(leaf),
                    original_path=str(self._home / leaf.relative_to(self._location)),
                    is_dir=is_dir,
                    size_bytes=size,
                )
            )

        entries.sort(key=lambda e: e.dumpster_path)
        return entries

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Yield the leaves below a directory without following symlinks."""
        for child in sorted(directory.iterdir()):
            if child.is_dir() and not child.is_symlink() and any(child.iterdir()):
                yield from self._walk(child)
            else:
                yield child

    @staticmethod
    def _move(source: Path, destination: Path) -> None:
        """Rename source to destination, wrapping platform errors."""
        try:
            source.rename(destination)
        except OSError as e:
            raise IoFailure(e) from e
