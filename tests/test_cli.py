"""Tests for CLI commands."""

import pytest

from claude_prune.cli.app import app, normalize_args


@pytest.fixture
def backup_dir(project_dir):
    return project_dir / "prune-backup"


class TestPruneCommand:
    """Tests for 'claude-prune prune'."""

    def test_dry_run_reports_and_leaves_file(
        self, cli_runner, session_file, backup_dir
    ):
        before = session_file.read_text()

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1", "--dry-run"])

        assert result.exit_code == 0
        assert "Scanned 8 lines (1 kept, 5 dropped)" in result.stdout
        assert "3 assistant messages found" in result.stdout
        assert "Dry-run only" in result.stdout
        assert session_file.read_text() == before
        assert not backup_dir.exists()

    def test_prune_writes_file_and_backup(
        self, cli_runner, session_file, backup_dir, transcript_lines
    ):
        before = session_file.read_text()

        result = cli_runner.invoke(app, ["prune", "sess-1", "--keep", "1"])

        assert result.exit_code == 0
        assert "Done:" in result.stdout
        assert session_file.read_text().splitlines() == [
            transcript_lines[0],
            transcript_lines[3],
            transcript_lines[7],
        ]
        backups = list(backup_dir.iterdir())
        assert len(backups) == 1
        assert backups[0].name.startswith("sess-1.jsonl.")
        assert backups[0].read_text() == before

    def test_invalid_utf8_is_preserved(self, cli_runner, session_file, backup_dir):
        lines = session_file.read_bytes().splitlines()
        lines.insert(3, b'{"type":"tool_use","name":"\xff\xfe"}')
        session_file.write_bytes(b"\n".join(lines) + b"\n")

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1"])

        assert result.exit_code == 0
        assert b'{"type":"tool_use","name":"\xff\xfe"}\n' in session_file.read_bytes()
        assert len(list(backup_dir.iterdir())) == 1

    def test_missing_transcript(self, cli_runner, project_dir):
        result = cli_runner.invoke(app, ["prune", "nope", "-k", "1"])

        assert result.exit_code == 1
        assert "No transcript at" in result.stdout

    def test_keep_is_required(self, cli_runner, session_file):
        result = cli_runner.invoke(app, ["prune", "sess-1"])
        assert result.exit_code != 0

    def test_backup_dir_name_from_config(self, cli_runner, session_file, claude_home):
        (claude_home / "prune.toml").write_text('backup_dir_name = "old"\n')

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "2"])

        assert result.exit_code == 0
        assert len(list((session_file.parent / "old").iterdir())) == 1

    def test_invalid_config_file(self, cli_runner, session_file, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("not valid toml [[[")

        result = cli_runner.invoke(
            app, ["prune", "sess-1", "-k", "1", "--config", str(bad)]
        )

        assert result.exit_code == 1
        assert "Invalid TOML" in result.stdout

    def test_interactive_decline_leaves_file(
        self, cli_runner, session_file, backup_dir, monkeypatch
    ):
        monkeypatch.setattr(
            "claude_prune.cli.commands.prune.is_interactive", lambda: True
        )
        before = session_file.read_text()

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1"], input="n\n")

        assert result.exit_code == 0
        assert "Overwrite original file?" in result.stdout
        assert session_file.read_text() == before
        assert not backup_dir.exists()

    def test_interactive_default_is_yes(
        self, cli_runner, session_file, backup_dir, monkeypatch
    ):
        monkeypatch.setattr(
            "claude_prune.cli.commands.prune.is_interactive", lambda: True
        )

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1"], input="\n")

        assert result.exit_code == 0
        assert backup_dir.exists()

    def test_force_skips_prompt(self, cli_runner, session_file, monkeypatch):
        monkeypatch.setattr(
            "claude_prune.cli.commands.prune.is_interactive", lambda: True
        )

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1", "--force"])

        assert result.exit_code == 0
        assert "Overwrite original file?" not in result.stdout

    def test_confirm_disabled_in_config(
        self, cli_runner, session_file, claude_home, monkeypatch
    ):
        (claude_home / "prune.toml").write_text("confirm = false\n")
        monkeypatch.setattr(
            "claude_prune.cli.commands.prune.is_interactive", lambda: True
        )

        result = cli_runner.invoke(app, ["prune", "sess-1", "-k", "1"])

        assert result.exit_code == 0
        assert "Overwrite original file?" not in result.stdout


class TestRestoreCommand:
    """Tests for 'claude-prune restore'."""

    def test_restore_after_prune(self, cli_runner, session_file):
        before = session_file.read_text()
        cli_runner.invoke(app, ["prune", "sess-1", "-k", "1"])
        assert session_file.read_text() != before

        result = cli_runner.invoke(app, ["restore", "sess-1"])

        assert result.exit_code == 0
        assert "Found latest backup from" in result.stdout
        assert "Restored:" in result.stdout
        assert session_file.read_text() == before

    def test_restore_picks_newest(self, cli_runner, session_file, backup_dir):
        backup_dir.mkdir()
        (backup_dir / "sess-1.jsonl.100").write_text("old\n")
        (backup_dir / "sess-1.jsonl.300").write_text("newest\n")
        (backup_dir / "sess-1.jsonl.200").write_text("middle\n")
        (backup_dir / "other.jsonl.900").write_text("other\n")

        result = cli_runner.invoke(app, ["restore", "sess-1"])

        assert result.exit_code == 0
        assert session_file.read_text() == "newest\n"

    def test_dry_run(self, cli_runner, session_file, backup_dir):
        backup_dir.mkdir()
        (backup_dir / "sess-1.jsonl.100").write_text("old\n")
        before = session_file.read_text()

        result = cli_runner.invoke(app, ["restore", "sess-1", "--dry-run"])

        assert result.exit_code == 0
        assert "Would restore from:" in result.stdout
        assert "Would restore to:" in result.stdout
        assert session_file.read_text() == before

    def test_no_backup_dir(self, cli_runner, session_file):
        result = cli_runner.invoke(app, ["restore", "sess-1"])

        assert result.exit_code == 1
        assert "No backup directory found" in result.stdout

    def test_no_backups_for_session(self, cli_runner, session_file, backup_dir):
        backup_dir.mkdir()
        (backup_dir / "other.jsonl.100").write_text("x\n")
        (backup_dir / "sess-1.jsonl.notanumber").write_text("x\n")

        result = cli_runner.invoke(app, ["restore", "sess-1"])

        assert result.exit_code == 1
        assert "No backups found for session sess-1" in result.stdout

    def test_interactive_default_is_no(
        self, cli_runner, session_file, backup_dir, monkeypatch
    ):
        monkeypatch.setattr(
            "claude_prune.cli.commands.restore.is_interactive", lambda: True
        )
        backup_dir.mkdir()
        (backup_dir / "sess-1.jsonl.100").write_text("old\n")
        before = session_file.read_text()

        result = cli_runner.invoke(app, ["restore", "sess-1"], input="\n")

        assert result.exit_code == 0
        assert "Restore session from backup" in result.stdout
        assert session_file.read_text() == before


class TestLegacyInvocation:
    """Tests for the 'claude-prune <session_id> -k N' form."""

    def test_routes_to_prune(self):
        assert normalize_args(["abc", "-k", "3"]) == ["prune", "abc", "-k", "3"]

    def test_routes_options_first(self):
        assert normalize_args(["--keep=3", "abc"]) == ["prune", "--keep=3", "abc"]

    def test_leaves_commands_alone(self):
        assert normalize_args(["restore", "abc"]) == ["restore", "abc"]
        assert normalize_args(["prune", "abc", "-k", "1"]) == ["prune", "abc", "-k", "1"]

    def test_leaves_root_options_alone(self):
        assert normalize_args(["--version"]) == ["--version"]
        assert normalize_args(["--help"]) == ["--help"]

    def test_session_without_keep_shows_help(self):
        assert normalize_args(["abc"]) == ["--help"]

    def test_empty(self):
        assert normalize_args([]) == []

    def test_legacy_form_prunes(self, cli_runner, session_file):
        result = cli_runner.invoke(
            app, normalize_args(["sess-1", "-k", "1", "--dry-run"])
        )

        assert result.exit_code == 0
        assert "Scanned 8 lines" in result.stdout


class TestRootOptions:
    """Tests for application-level options."""

    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip()

    def test_help_lists_commands(self, cli_runner):
        result = cli_runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "prune" in result.stdout
        assert "restore" in result.stdout
