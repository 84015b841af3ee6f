"""gitstate CLI — Typer application with status, merge-base, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gitstate import __version__
from gitstate.config.loader import ConfigError, load_config
from gitstate.config.schema import GitStateConfig
from gitstate.git.runner import GitError, GitRunner, get_repo_root
from gitstate.logging_setup import setup_logging

app = typer.Typer(
    name="gitstate",
    help="Structured working-tree status and merge-base lookup.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_FORMATS = ("terminal", "json")


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    try:
        return get_repo_root(GitRunner())
    except GitError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(repo_root: Path, config: Optional[str], verbose: bool, debug: bool) -> GitStateConfig:
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        err_console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    level = cfg.logging.level
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    setup_logging(level)
    return cfg


def _check_format(format: str) -> None:
    if format not in _FORMATS:
        err_console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitstate.toml"),
    format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal | json"),
    no_renames: bool = typer.Option(False, "--no-renames", help="Disable rename detection"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Show the working tree's files, staged first."""
    from gitstate.files.builder import build_file_list
    from gitstate.git.filetype import make_classifier
    from gitstate.git.runner import GitConfigReader
    from gitstate.output import json_report, terminal

    _check_format(format)
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config, verbose, debug)

    runner = GitRunner(repo_root)
    files = build_file_list(
        runner,
        GitConfigReader(runner),
        make_classifier(repo_root),
        no_renames=no_renames or cfg.status.no_renames,
        default_untracked=cfg.status.default_untracked,
    )

    if format == "json":
        print(json_report.render(files))
    else:
        terminal.render(files, console)


# ── merge-base ────────────────────────────────────────────────────────────────


@app.command("merge-base")
def merge_base(
    ref: str = typer.Argument("HEAD", help="Reference whose comparison commit to resolve"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitstate.toml"),
    format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal | json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Print the commit a history view of REF should compare against."""
    import json

    from gitstate.commits.merge_base import resolve_comparison_commit

    _check_format(format)
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config, verbose, debug)

    try:
        commit = resolve_comparison_commit(
            GitRunner(repo_root),
            ref,
            trunk_branches=cfg.history.trunk_branches,
            integration_branch=cfg.history.integration_branch,
        )
    except GitError as exc:
        err_console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format == "json":
        print(json.dumps({"ref": ref, "commit": commit}, indent=2))
    elif commit:
        console.print(commit)
    else:
        console.print("[dim]No merge-base found.[/dim]")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitstate.toml in the repo root."""
    from gitstate.config.defaults import DEFAULT_TOML
    from gitstate.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        err_console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    err_console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitstate {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Structured working-tree status for git repositories."""
