"""Unit tests for the yeet CLI.

Tests the default yeet verb, --restore, --empty, --list, --init-config, option
validation and exit status handling.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner
from yeet import __version__
from yeet.cli.main import app
from yeet.core.config import ConfigError, YeetConfig, load_config
from yeet.core.errors import HomeDirectoryUnavailable, IoFailure

runner = CliRunner()


@pytest.fixture
def dumpster_dir(isolated_env: Path) -> Path:
    """Location of the dumpster inside the sandboxed home."""
    return isolated_env / ".dumpster"


class TestYeetCommand:
    """Tests for the default yeet verb."""

    def test_yeet_file(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """A relative path is moved into the mirrored dumpster location."""
        make_file(isolated_env / "docs" / "note.txt")

        result = runner.invoke(app, ["docs/note.txt"])

        assert result.exit_code == 0
        assert (dumpster_dir / "docs" / "note.txt").exists()
        assert not (isolated_env / "docs" / "note.txt").exists()
        assert "yeet" in result.output

    def test_creates_dumpster(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """The dumpster root is created on first use."""
        make_file(isolated_env / "a.txt")
        assert not dumpster_dir.exists()

        runner.invoke(app, ["a.txt"])

        assert dumpster_dir.is_dir()

    def test_failures_are_reported_and_skipped(
        self, isolated_env: Path, tmp_path: Path, dumpster_dir: Path, make_file
    ) -> None:
        """Failing arguments are reported as '<arg>: <message>' and exit stays 0."""
        make_file(isolated_env / "good.txt")
        outside = str(make_file(tmp_path / "outside.txt"))

        result = runner.invoke(app, [outside, "good.txt"])

        assert result.exit_code == 0
        assert f"{outside}: cannot yeet file that is outside of the home directory" in (
            result.output
        )
        assert (dumpster_dir / "good.txt").exists()

    def test_all_failures_still_exit_zero(self, isolated_env: Path) -> None:
        """Per-argument failures never change the exit status."""
        result = runner.invoke(app, ["nope-1", "nope-2"])

        assert result.exit_code == 0
        assert "nope-1: " in result.output
        assert "nope-2: " in result.output

    def test_already_in_dumpster(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """Yeeting from the dumpster is refused."""
        make_file(dumpster_dir / "x.txt")

        result = runner.invoke(app, [".dumpster/x.txt"])

        assert result.exit_code == 0
        assert ".dumpster/x.txt: cannot yeet file that is already in the dumpster" in (
            result.output
        )
        assert (dumpster_dir / "x.txt").exists()

    def test_collision_suffix(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """Yeeting the same name twice suffixes the second one."""
        make_file(isolated_env / "f.txt", "1")
        runner.invoke(app, ["f.txt"])
        make_file(isolated_env / "f.txt", "2")

        result = runner.invoke(app, ["f.txt"])

        assert result.exit_code == 0
        assert (dumpster_dir / "f.txt").read_text() == "1"
        assert (dumpster_dir / "f.txt.0").read_text() == "2"

    def test_quiet_suppresses_success(self, isolated_env: Path, make_file) -> None:
        """--quiet prints nothing for successful moves."""
        make_file(isolated_env / "a.txt")

        result = runner.invoke(app, ["-q", "a.txt"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_custom_dumpster_name(self, isolated_env: Path, tmp_path: Path, make_file) -> None:
        """The dumpster name from the config file is used."""
        make_file(tmp_path / "xdg-config" / "yeet" / "config.toml", 'dumpster_name = ".bin"\n')
        make_file(isolated_env / "a.txt")

        result = runner.invoke(app, ["a.txt"])

        assert result.exit_code == 0
        assert (isolated_env / ".bin" / "a.txt").exists()


class TestRestoreCommand:
    """Tests for --restore."""

    @pytest.mark.parametrize("flag", ["--restore", "-r"])
    def test_restore(self, isolated_env: Path, dumpster_dir: Path, make_file, flag: str) -> None:
        """Both restore flags move the file back home."""
        make_file(dumpster_dir / "docs" / "note.txt")
        (isolated_env / "docs").mkdir()

        result = runner.invoke(app, [flag, ".dumpster/docs/note.txt"])

        assert result.exit_code == 0
        assert (isolated_env / "docs" / "note.txt").exists()
        assert not (dumpster_dir / "docs" / "note.txt").exists()

    def test_round_trip(self, isolated_env: Path, make_file) -> None:
        """yeet then restore puts the file back where it was."""
        original = make_file(isolated_env / "a" / "b" / "c.txt", "data")

        runner.invoke(app, ["a/b/c.txt"])
        result = runner.invoke(app, ["-r", ".dumpster/a/b/c.txt"])

        assert result.exit_code == 0
        assert original.read_text() == "data"

    def test_restore_not_in_dumpster(self, isolated_env: Path, make_file) -> None:
        """Restoring a path outside the dumpster is reported."""
        make_file(isolated_env / "a.txt")

        result = runner.invoke(app, ["-r", "a.txt"])

        assert result.exit_code == 0
        assert "a.txt: cannot restore a file that is not in the dumpster" in result.output
        assert (isolated_env / "a.txt").exists()

    def test_restore_missing_parent(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """Restore does not recreate vanished directories."""
        make_file(dumpster_dir / "gone" / "file.txt")

        result = runner.invoke(app, ["-r", ".dumpster/gone/file.txt"])

        assert result.exit_code == 0
        assert ".dumpster/gone/file.txt: " in result.output
        assert "No such file or directory" in result.output
        assert (dumpster_dir / "gone" / "file.txt").exists()


class TestEmptyCommand:
    """Tests for --empty."""

    def test_empty(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """--empty removes everything below the dumpster root."""
        make_file(dumpster_dir / "a.txt")
        make_file(dumpster_dir / "docs" / "b.txt")

        result = runner.invoke(app, ["--empty"])

        assert result.exit_code == 0
        assert dumpster_dir.is_dir()
        assert list(dumpster_dir.iterdir()) == []
        assert "2 entries removed" in result.output

    def test_empty_ignores_paths(self, isolated_env: Path, make_file) -> None:
        """Paths given together with --empty are not yeeted."""
        keep = make_file(isolated_env / "keep.txt")

        result = runner.invoke(app, ["--empty", "keep.txt"])

        assert result.exit_code == 0
        assert keep.exists()

    def test_empty_already_empty(self, isolated_env: Path) -> None:
        """Emptying an empty dumpster prints a notice."""
        result = runner.invoke(app, ["--empty"])

        assert result.exit_code == 0
        assert "already empty" in result.output

    def test_empty_reports_each_failure_once(
        self, isolated_env: Path, dumpster_dir: Path, make_file
    ) -> None:
        """An entry that cannot be removed is reported once and the rest are removed."""
        make_file(dumpster_dir / "locked" / "a.txt")
        make_file(dumpster_dir / "other.txt")

        with patch(
            "yeet.dumpster.engine.shutil.rmtree",
            side_effect=PermissionError(13, "Permission denied", str(dumpster_dir / "locked")),
        ):
            result = runner.invoke(app, ["--empty"])

        assert result.exit_code == 0
        assert result.output.count("Permission denied") == 1
        assert "locked: [Errno 13] Permission denied" in result.output
        assert not (dumpster_dir / "other.txt").exists()
        assert "1 removed" in result.output

    def test_empty_listing_failure(self, isolated_env: Path) -> None:
        """A dumpster that cannot be listed exits with status 1."""
        with patch(
            "yeet.cli.main.DumpsterOperator.run",
            side_effect=IoFailure(PermissionError(13, "Permission denied")),
        ):
            result = runner.invoke(app, ["--empty"])

        assert result.exit_code == 1
        assert "failed to empty dumpster" in result.output


class TestListCommand:
    """Tests for --list."""

    def test_list_empty(self, isolated_env: Path) -> None:
        """An empty dumpster prints a notice."""
        result = runner.invoke(app, ["--list"])

        assert result.exit_code == 0
        assert "The dumpster is empty." in result.output

    def test_list_entries(self, isolated_env: Path, dumpster_dir: Path, make_file) -> None:
        """Entries are shown in a table with a summary line."""
        make_file(dumpster_dir / "a.txt")
        make_file(dumpster_dir / "b.txt")

        result = runner.invoke(app, ["-l"])

        assert result.exit_code == 0
        assert "Dumpster Contents" in result.output
        assert "2 entries" in result.output


class TestInitConfigCommand:
    """Tests for --init-config."""

    def test_writes_default_config(self, isolated_env: Path, tmp_path: Path) -> None:
        """The default settings are written to the XDG config path."""
        config_path = tmp_path / "xdg-config" / "yeet" / "config.toml"

        result = runner.invoke(app, ["--init-config"])

        assert result.exit_code == 0
        assert "Created config file" in result.output
        assert load_config(config_path) == YeetConfig()
        assert not (isolated_env / ".dumpster").exists()

    def test_written_config_is_used(self, isolated_env: Path, tmp_path: Path, make_file) -> None:
        """An edited config file written by --init-config drives later runs."""
        config_path = tmp_path / "xdg-config" / "yeet" / "config.toml"
        runner.invoke(app, ["--init-config"])
        config_path.write_text(config_path.read_text().replace(".dumpster", ".bin"))
        make_file(isolated_env / "a.txt")

        result = runner.invoke(app, ["a.txt"])

        assert result.exit_code == 0
        assert (isolated_env / ".bin" / "a.txt").exists()

    def test_existing_config_is_kept(self, isolated_env: Path, tmp_path: Path, make_file) -> None:
        """An existing config file is never overwritten."""
        config_path = make_file(
            tmp_path / "xdg-config" / "yeet" / "config.toml", "max_duplicates = 3\n"
        )

        result = runner.invoke(app, ["--init-config"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert config_path.read_text() == "max_duplicates = 3\n"

    def test_write_failure(self, isolated_env: Path) -> None:
        """A config that cannot be written exits with status 1."""
        with patch("yeet.cli.main.save_config", side_effect=ConfigError("disk full")):
            result = runner.invoke(app, ["--init-config"])

        assert result.exit_code == 1
        assert "failed to write config: disk full" in result.output


class TestOptions:
    """Tests for global options and initialization."""

    def test_no_arguments_shows_help(self, isolated_env: Path) -> None:
        """Without paths or a mode flag, help is printed."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "--restore" in result.output

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"yeet version {__version__}" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["--restore", "--empty"],
            ["--empty", "--list"],
            ["-r", "-l", "a.txt"],
            ["--init-config", "--empty"],
        ],
    )
    def test_modes_are_exclusive(self, isolated_env: Path, args: list[str]) -> None:
        """Combining mode flags is a usage error."""
        result = runner.invoke(app, args)

        assert result.exit_code == 2

    def test_home_unavailable(self, isolated_env: Path, make_file) -> None:
        """Initialization failure exits 1 before touching any argument."""
        keep = make_file(isolated_env / "a.txt")

        with patch(
            "yeet.cli.main.Dumpster.with_default_location",
            side_effect=HomeDirectoryUnavailable(),
        ):
            result = runner.invoke(app, ["a.txt"])

        assert result.exit_code == 1
        assert "failed to initialize dumpster" in result.output
        assert keep.exists()

    def test_invalid_config(self, isolated_env: Path, tmp_path: Path, make_file) -> None:
        """An invalid config file is an initialization failure."""
        make_file(tmp_path / "xdg-config" / "yeet" / "config.toml", "max_duplicates = 0\n")
        keep = make_file(isolated_env / "a.txt")

        result = runner.invoke(app, ["a.txt"])

        assert result.exit_code == 1
        assert "failed to initialize dumpster" in result.output
        assert keep.exists()
