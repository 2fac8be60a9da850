"""Main CLI application."""

import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer

from claude_prune.cli.commands import prune, restore

DEFAULT_COMMAND = "prune"
_ROOT_OPTIONS = {"--help", "--version", "-V"}

app = typer.Typer(
    name="claude-prune",
    help="Prune early messages from a Claude Code session.jsonl file",
    no_args_is_help=True,
    add_completion=False,
)

prune.register(app)
restore.register(app)


def _package_version() -> str:
    try:
        return version("claude-prune")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(_package_version())
        raise typer.Exit()


@app.callback()
def _root(
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show the version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Prune early messages from a Claude Code session.jsonl file."""


def _has_keep_option(args: Sequence[str]) -> bool:
    return any(a == "--keep" or a.startswith(("--keep=", "-k")) for a in args)


def normalize_args(args: Sequence[str]) -> list[str]:
    """Route the legacy ``claude-prune <session_id> -k N`` form to ``prune``.

    Arguments that already name a command or a root option are left alone.
    A bare session id without ``--keep`` falls back to the help screen.
    """
    args = list(args)
    if not args or args[0] in app_command_names() or args[0] in _ROOT_OPTIONS:
        return args
    if _has_keep_option(args):
        return [DEFAULT_COMMAND, *args]
    return ["--help"]


def app_command_names() -> set[str]:
    return {cmd.name or cmd.callback.__name__ for cmd in app.registered_commands}


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry point."""
    args = normalize_args(sys.argv[1:] if argv is None else argv)
    app(args=args, prog_name="claude-prune")


if __name__ == "__main__":
    main()
