"""Tests for the roomtypes CLI."""

import json

import pytest
from typer.testing import CliRunner

from roomtypes.cli.main import app
from roomtypes.errors import MissingReferenceType

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Config pointing rooms and logs into a temp directory."""
    rooms_dir = tmp_path / "rooms"
    rooms_dir.mkdir()
    (rooms_dir / "R.json").write_text(
        json.dumps({"t": "c", "ro": True, "muted": ["alice"], "unmuted": ["bob"]})
    )

    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "logging": {"file": str(tmp_path / "roomtypes.log")},
        "storage": {"roomsDir": str(rooms_dir)},
    }))
    return path


class TestCli:
    """Test CLI commands."""

    def test_types(self, config_file):
        result = runner.invoke(app, ["types", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "channel" in result.stdout
        assert "Direct message" in result.stdout

    def test_sections(self, config_file):
        result = runner.invoke(app, ["sections", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Standard: c, p, d" in result.stdout

    def test_read_only_for_muted_user(self, config_file):
        result = runner.invoke(app, ["read-only", "R", "--user", "alice", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "read-only" in result.stdout

    def test_writable_for_unmuted_user(self, config_file):
        result = runner.invoke(app, ["read-only", "R", "--user", "bob", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "writable" in result.stdout

    def test_permission_grant(self, config_file):
        result = runner.invoke(
            app,
            ["read-only", "R", "--user", "carol", "--grant", "post-readonly", "--config", str(config_file)],
        )

        assert result.exit_code == 0
        assert "writable" in result.stdout

    def test_unknown_room(self, config_file):
        result = runner.invoke(app, ["read-only", "NOPE", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_route(self, config_file):
        result = runner.invoke(app, ["route", "c", "--name", "general", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "channel" in result.stdout
        assert "/channel/general" in result.stdout

    def test_unknown_route_type(self, config_file):
        result = runner.invoke(app, ["route", "zzz", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Unknown room type" in result.stdout

    def test_missing_reference_type_reported(self, tmp_path):
        """Disabling the built-in kinds leaves no reference kinds to bootstrap with."""
        path = tmp_path / "no-builtin.json"
        path.write_text(json.dumps({
            "registry": {"registerBuiltin": False},
            "logging": {"file": str(tmp_path / "roomtypes.log")},
        }))

        for command in (["sections"], ["types"], ["route", "c"]):
            result = runner.invoke(app, command + ["--config", str(path)])

            assert result.exit_code == 1
            assert not isinstance(result.exception, MissingReferenceType)
            assert "Reference room type 'c' is not registered" in result.stdout

    def test_null_read_only_flag_is_writable(self, config_file, tmp_path):
        """A room with ro: null is reported as writable, not missing."""
        (tmp_path / "rooms" / "N.json").write_text(json.dumps({"t": "c", "ro": None}))

        result = runner.invoke(app, ["read-only", "N", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "writable" in result.stdout
