"""Rich terminal reporter for the file list."""

from __future__ import annotations

from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitstate.git.models import FileState


def _status_text(f: FileState) -> Text:
    text = Text()
    text.append(f.short_status[0], style="green" if f.has_staged_changes else "dim")
    text.append(f.short_status[1], style="red" if f.has_unstaged_changes else "dim")
    return text


def _flags(f: FileState) -> str:
    flags: List[str] = []
    if f.has_staged_changes:
        flags.append("staged")
    if f.has_unstaged_changes:
        flags.append("unstaged")
    if not f.tracked:
        flags.append("untracked")
    if f.deleted:
        flags.append("deleted")
    if f.has_inline_merge_conflicts:
        flags.append("conflict (inline)")
    elif f.has_merge_conflicts:
        flags.append("conflict")
    return ", ".join(flags)


def render(files: Sequence[FileState], console: Optional[Console] = None) -> None:
    """Print the file list to the terminal using Rich."""
    console = console or Console()

    if not files:
        console.print("[dim]No files to show.[/dim]")
        return

    table = Table(title="Files", title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", width=6)
    table.add_column("File", style="magenta")
    table.add_column("Kind", style="cyan")
    table.add_column("Flags")

    for f in files:
        name_style = "bold red" if f.has_merge_conflicts else ""
        table.add_row(_status_text(f), Text(f.name, style=name_style), f.kind.value, _flags(f))

    console.print(table)
    staged = sum(1 for f in files if f.has_staged_changes)
    console.print(f"[dim]Staged:[/dim]   {staged}")
    console.print(f"[dim]Unstaged:[/dim] {len(files) - staged}")
