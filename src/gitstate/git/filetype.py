"""Filesystem classification of status entries."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable, Optional

from gitstate.git.models import FileKind

Classifier = Callable[[str], FileKind]


def classify_path(path: str, root: Optional[Path] = None) -> FileKind:
    """Return the kind of filesystem entry at *path*, relative to *root*.

    Missing paths (deleted files, the composite name of a rename) are
    reported as ``FileKind.OTHER``.
    """
    full = (root or Path.cwd()) / path.rstrip("/")
    try:
        mode = os.lstat(full).st_mode
    except OSError:
        return FileKind.OTHER

    if stat.S_ISLNK(mode):
        return FileKind.SYMLINK
    if stat.S_ISDIR(mode):
        if (full / ".git").exists():
            return FileKind.SUBMODULE
        return FileKind.DIRECTORY
    if stat.S_ISREG(mode):
        return FileKind.FILE
    return FileKind.OTHER


def make_classifier(root: Path) -> Classifier:
    """Bind :func:`classify_path` to a repository root."""

    def classify(path: str) -> FileKind:
        return classify_path(path, root)

    return classify
