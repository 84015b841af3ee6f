"""Git subprocess wrapper — command runner and config reader."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Protocol, Sequence

from loguru import logger

GIT = "git"


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


class CommandRunner(Protocol):
    def run(self, program: str, args: Sequence[str]) -> str:
        """Run *program* with *args* and return stdout. Raises GitError on failure."""
        ...


class ConfigReader(Protocol):
    def get_value(self, key: str) -> str:
        ...


class GitRunner:
    """Run commands in a fixed working directory via ``subprocess``."""

    def __init__(self, cwd: Optional[Path] = None, timeout: int = 30) -> None:
        self.cwd = cwd or Path.cwd()
        self.timeout = timeout

    def run(self, program: str, args: Sequence[str]) -> str:
        cmd = [program, *args]
        logger.debug(f"Running {' '.join(cmd)} in {self.cwd}")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GitError(f"{program} is not installed or not on PATH")
        except subprocess.TimeoutExpired:
            raise GitError(f"command timed out after {self.timeout}s: {' '.join(cmd)}")

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise GitError(
                f"{' '.join(cmd)} exited with {result.returncode}"
                + (f": {stderr}" if stderr else "")
            )
        return result.stdout


class GitConfigReader:
    """Resolve git config keys through a command runner."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def get_value(self, key: str) -> str:
        # `git config --get` exits 1 for an unset key
        try:
            return self._runner.run(GIT, ["config", "--get", key]).strip()
        except GitError:
            return ""


def get_repo_root(runner: CommandRunner) -> Path:
    """Return the root of the current git repository."""
    out = runner.run(GIT, ["rev-parse", "--show-toplevel"])
    return Path(out.strip())
