"""Shared test fixtures — scripted git runner, config reader, temp git repos."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

import pytest
from loguru import logger

from gitstate.git.models import FileKind, FileState
from gitstate.git.runner import GitError
from gitstate.git.status_parser import parse_status_line

Response = Union[str, Exception]


class FakeRunner:
    """Command runner keyed on the git subcommand (``args[0]``)."""

    def __init__(self, responses: Dict[str, Response]) -> None:
        self.responses = responses
        self.calls: List[Tuple[str, List[str]]] = []

    def run(self, program: str, args: Sequence[str]) -> str:
        self.calls.append((program, list(args)))
        response = self.responses.get(args[0])
        if response is None:
            raise GitError(f"unexpected command: {program} {' '.join(args)}")
        if isinstance(response, Exception):
            raise response
        return response


class FakeConfigReader:
    def __init__(self, values: Dict[str, str] | None = None) -> None:
        self.values = values or {}
        self.keys: List[str] = []

    def get_value(self, key: str) -> str:
        self.keys.append(key)
        return self.values.get(key, "")


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # CLI tests swap in a sink bound to the runner's captured stderr
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def log_records() -> List[Tuple[str, str]]:
    """Capture (level, message) pairs emitted through loguru."""
    records: List[Tuple[str, str]] = []
    handler_id = logger.add(
        lambda m: records.append((m.record["level"].name, m.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def config_reader() -> FakeConfigReader:
    return FakeConfigReader()


@pytest.fixture
def sample_status() -> str:
    """Porcelain output covering staged, unstaged, untracked, and conflicted files."""
    return (
        " M src/app.py\n"
        "M  README.md\n"
        "?? notes.txt\n"
        "UU merge.txt\n"
        "A  added.py\n"
        "R  old.py -> new.py\n"
    )


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository on branch ``main``."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(["git", "branch", "-M", "main"], cwd=tmp_path, capture_output=True, check=True)
    return tmp_path


@pytest.fixture
def make_runner():
    """Factory for a scripted command runner keyed on the git subcommand."""
    return FakeRunner


@pytest.fixture
def make_config_reader():
    """Factory for a config reader backed by a dict."""
    return FakeConfigReader


@pytest.fixture
def fixed_kind():
    """Classifier that reports every path as a regular file."""

    def classify(path: str) -> FileKind:
        return FileKind.FILE

    return classify


@pytest.fixture
def parse_lines(fixed_kind):
    """Parse raw status records into FileStates."""

    def parse(*lines: str) -> List[FileState]:
        return [parse_status_line(line, fixed_kind) for line in lines]

    return parse


@pytest.fixture
def run_git():
    """Run git in a repository and return stdout."""

    def run(repo: Path, *args: str) -> str:
        return subprocess.run(
            ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
        ).stdout

    return run
