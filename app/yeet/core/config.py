"""User configuration for yeet.

Configuration is optional and stored in ~/.config/yeet/config.toml.
A missing file yields the defaults, which match the fixed ``.dumpster``
layout.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from yeet.core.paths import DEFAULT_DUMPSTER_NAME, get_config_path

# Collision suffixes are probed for n in range(MAX_DUPLICATES)
MAX_DUPLICATES = 65535


class YeetConfig(BaseModel):
    """Configuration for the dumpster.

    Attributes:
        dumpster_name: Directory name of the dumpster under the home directory.
        max_duplicates: Number of collision suffixes (.0, .1, ...) to probe
            before giving up.
    """

    model_config = ConfigDict(extra="forbid")

    dumpster_name: Annotated[
        str,
        Field(description="Dumpster directory name under the home directory"),
    ] = DEFAULT_DUMPSTER_NAME
    max_duplicates: Annotated[
        int,
        Field(ge=1, le=MAX_DUPLICATES, description="Collision suffixes to probe"),
    ] = MAX_DUPLICATES

    @field_validator("dumpster_name")
    @classmethod
    def validate_dumpster_name(cls, v: str) -> str:
        """Ensure the dumpster name is a single path component."""
        name = v.strip()
        if name in ("", ".", ".."):
            msg = f"dumpster_name must name a directory, got '{v}'"
            raise ValueError(msg)
        if os.sep in name or (os.altsep and os.altsep in name):
            msg = f"dumpster_name must not contain a path separator, got '{v}'"
            raise ValueError(msg)
        return name


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> YeetConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated YeetConfig, or the defaults if the file doesn't exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return YeetConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return YeetConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: YeetConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace().

    Args:
        config: The YeetConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
