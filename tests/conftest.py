"""Shared test fixtures and factories."""

import json
from pathlib import Path
from typing import Any

import pytest

from claude_prune.config.paths import ENV_VAR, get_claude_home, get_project_dir

# =============================================================================
# Transcript Factories
# =============================================================================


def header_line(session_id: str = "sess-1") -> str:
    """Factory for a session header line."""
    return json.dumps({"type": "summary", "sessionId": session_id})


def message_line(
    msg_type: str,
    text: str = "hi",
    cache_read: int | None = None,
    nested_usage: bool = True,
) -> str:
    """Factory for a message line, optionally carrying a cache-read counter."""
    obj: dict[str, Any] = {"type": msg_type, "message": {"content": text}}
    if cache_read is not None:
        usage = {"input_tokens": 10, "cache_read_input_tokens": cache_read}
        if nested_usage:
            obj["message"]["usage"] = usage
        else:
            obj["usage"] = usage
    return json.dumps(obj)


def tool_line(name: str = "bash") -> str:
    """Factory for a non-message tool record."""
    return json.dumps({"type": "tool_use", "name": name})


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def claude_home(monkeypatch, tmp_path: Path):
    """Point CLAUDE_CONFIG_DIR at a temp dir and run from a temp project cwd."""
    home = tmp_path / "claude"
    cwd = tmp_path / "work" / "app"
    cwd.mkdir(parents=True)
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv("CLAUDE_PRUNE_CONFIG", raising=False)
    monkeypatch.delenv("CLAUDE_PRUNE_LOG_LEVEL", raising=False)
    monkeypatch.chdir(cwd)
    get_claude_home.cache_clear()
    yield home
    get_claude_home.cache_clear()


@pytest.fixture
def project_dir(claude_home: Path) -> Path:
    """Project directory for the current working directory."""
    path = get_project_dir()
    path.mkdir(parents=True)
    return path


@pytest.fixture
def transcript_lines() -> list[str]:
    """A small transcript: header, three user/assistant turns, tool records."""
    return [
        header_line(),
        message_line("user", "q1"),
        message_line("assistant", "a1", cache_read=100),
        tool_line(),
        message_line("user", "q2"),
        message_line("assistant", "a2", cache_read=200),
        message_line("user", "q3"),
        message_line("assistant", "a3"),
    ]


@pytest.fixture
def session_file(project_dir: Path, transcript_lines: list[str]) -> Path:
    """Write the sample transcript as session 'sess-1'."""
    path = project_dir / "sess-1.jsonl"
    path.write_text("\n".join(transcript_lines) + "\n")
    return path


# =============================================================================
# CLI Test Helpers
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
