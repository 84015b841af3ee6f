"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

UNTRACKED_MODES: tuple[str, ...] = ("no", "normal", "all")


@dataclass
class StatusConfig:
    no_renames: bool = False
    default_untracked: str = "all"  # used when status.showUntrackedFiles is unset


@dataclass
class HistoryConfig:
    trunk_branches: List[str] = field(default_factory=lambda: ["master", "main"])
    integration_branch: str = "develop"


@dataclass
class LoggingConfig:
    level: LogLevel = "WARNING"


@dataclass
class GitStateConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
