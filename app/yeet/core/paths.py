"""Path management for yeet.

This module provides the home and working directory lookups, the
lexical Location Resolver, the dumpster root location, and XDG-compliant
configuration paths.

Defaults:
- Dumpster: ~/.dumpster/
- Config: ~/.config/yeet/
"""

import logging
import os
from pathlib import Path

from yeet.core.errors import HomeDirectoryUnavailable, IoFailure, WorkingDirectoryUnavailable

logger = logging.getLogger(__name__)

# Application identifier for directory naming
APP_NAME = "yeet"

# Name of the dumpster directory, created directly under the home directory
DEFAULT_DUMPSTER_NAME = ".dumpster"


def get_home_dir() -> Path:
    """Get the current user's home directory.

    Returns:
        Absolute path to the home directory.

    Raises:
        HomeDirectoryUnavailable: If the platform cannot supply one.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnavailable() from e


def get_working_dir() -> Path:
    """Get the current working directory.

    Returns:
        Absolute path to the current working directory.

    Raises:
        WorkingDirectoryUnavailable: If the directory cannot be determined
            (for example, it was removed while the process was running).
    """
    try:
        return Path.cwd()
    except OSError as e:
        raise WorkingDirectoryUnavailable() from e


def resolve_location(path: str | Path, cwd: Path) -> Path:
    """Resolve a path to an absolute path without touching the filesystem.

    Components are applied in order on top of ``cwd``: ``..`` drops the last
    component (a no-op at the root), ``.`` is skipped and anything else is
    appended. An absolute input replaces the accumulator at its root
    component. Symbolic links are never followed and the path does not need
    to exist.

    Args:
        path: Relative or absolute path.
        cwd: Absolute directory that relative paths are interpreted against.

    Returns:
        Lexically normalized absolute path.
    """
    resolved = cwd
    for component in Path(path).parts:
        if component == "..":
            resolved = resolved.parent
        elif component != ".":
            resolved = resolved / component

    logger.debug("Resolved %s against %s to %s", path, cwd, resolved)
    return resolved


def get_dumpster_dir(home: Path, name: str = DEFAULT_DUMPSTER_NAME) -> Path:
    """Get the dumpster root for a home directory.

    Args:
        home: Home directory the dumpster mirrors.
        name: Directory name of the dumpster under ``home``.

    Returns:
        Path to ``home/name``.
    """
    return home / name


def ensure_dumpster_dir(location: Path) -> Path:
    """Create the dumpster root if it doesn't exist.

    Only the final directory is created; the home directory itself is
    expected to exist.

    Args:
        location: Dumpster root path.

    Returns:
        The created/existing dumpster root.

    Raises:
        IoFailure: If the directory cannot be created.
    """
    if not location.exists():
        try:
            location.mkdir()
        except OSError as e:
            raise IoFailure(e) from e
        logger.info("Created dumpster at %s", location)
    return location


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return get_home_dir() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/yeet/ (or XDG_CONFIG_HOME/yeet/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/yeet/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/yeet/theme.toml.
    """
    return get_config_dir() / "theme.toml"
