"""Data models for working-tree status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

RENAME_SEPARATOR = " -> "
RENAME_CODES = frozenset("RC")


class FileKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SUBMODULE = "submodule"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class StatusFlags:
    """Semantic flags decoded from a two-character porcelain code."""

    has_staged_changes: bool = False
    has_unstaged_changes: bool = False
    tracked: bool = False
    deleted: bool = False
    has_merge_conflicts: bool = False
    has_inline_merge_conflicts: bool = False


@dataclass(frozen=True)
class FileState:
    """One path's index/worktree status as reported by ``git status``."""

    name: str  # "old -> new" on renames
    display_string: str
    short_status: str
    has_staged_changes: bool = False
    has_unstaged_changes: bool = False
    tracked: bool = True
    deleted: bool = False
    has_merge_conflicts: bool = False
    has_inline_merge_conflicts: bool = False
    kind: FileKind = FileKind.OTHER

    @property
    def is_rename(self) -> bool:
        # a plain path may itself contain " -> "; only R/C records are pairs
        return RENAME_SEPARATOR in self.name and any(c in RENAME_CODES for c in self.short_status)

    def names(self) -> List[str]:
        """Return both halves of a rename, or just the name."""
        if self.is_rename:
            return self.name.split(RENAME_SEPARATOR, 1)
        return [self.name]

    def matches(self, other: "FileState") -> bool:
        """True when the two entries share any path (``A`` matches ``A -> B``)."""
        other_names = other.names()
        return any(name in other_names for name in self.names())
