"""Build the ordered file list from ``git status --porcelain``."""

from __future__ import annotations

from typing import Iterable, List

from loguru import logger

from gitstate.git.filetype import Classifier
from gitstate.git.models import FileState
from gitstate.git.runner import GIT, CommandRunner, ConfigReader, GitError
from gitstate.git.status_parser import parse_status_line

UNTRACKED_FILES_KEY = "status.showUntrackedFiles"
DEFAULT_UNTRACKED_MODE = "all"


def sort_by_staged(files: Iterable[FileState]) -> List[FileState]:
    """Staged files first, then the rest; each group stably sorted by name."""
    staged: List[FileState] = []
    unstaged: List[FileState] = []
    for f in files:
        (staged if f.has_staged_changes else unstaged).append(f)

    staged.sort(key=lambda f: f.name)
    unstaged.sort(key=lambda f: f.name)
    return staged + unstaged


def status_args(untracked_mode: str, no_renames: bool = False) -> List[str]:
    args = ["status", f"--untracked-files={untracked_mode}", "--porcelain"]
    if no_renames:
        args.append("--no-renames")
    return args


def get_status_text(
    runner: CommandRunner,
    config_reader: ConfigReader,
    *,
    no_renames: bool = False,
    default_untracked: str = DEFAULT_UNTRACKED_MODE,
) -> str:
    """Return raw porcelain output, or an empty string if git fails."""
    untracked_mode = config_reader.get_value(UNTRACKED_FILES_KEY) or default_untracked
    try:
        return runner.run(GIT, status_args(untracked_mode, no_renames))
    except GitError as exc:
        logger.error(f"git status failed: {exc}")
        return ""


def split_status_lines(text: str) -> List[str]:
    """Split porcelain output into records, dropping git's own warnings."""
    records: List[str] = []
    for line in text.splitlines():
        if not line:
            continue
        if line.startswith("warning"):
            logger.warning(f"warning when calling git status: {line}")
            continue
        # Shorter than "XY p" can't carry a path
        if len(line) < 3:
            logger.debug(f"skipping malformed status line: {line!r}")
            continue
        records.append(line)
    return records


def build_file_list(
    runner: CommandRunner,
    config_reader: ConfigReader,
    classify: Classifier,
    *,
    no_renames: bool = False,
    default_untracked: str = DEFAULT_UNTRACKED_MODE,
) -> List[FileState]:
    """Fetch, parse and order the working tree's file states."""
    text = get_status_text(
        runner,
        config_reader,
        no_renames=no_renames,
        default_untracked=default_untracked,
    )
    files = [parse_status_line(line, classify) for line in split_status_lines(text)]
    logger.debug(f"Parsed {len(files)} status entries")
    return sort_by_staged(files)
