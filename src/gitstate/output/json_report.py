"""JSON reporter for scripting."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from gitstate.git.models import FileState


def file_to_dict(f: FileState) -> Dict[str, Any]:
    return {
        "name": f.name,
        "short_status": f.short_status,
        "kind": f.kind.value,
        "staged": f.has_staged_changes,
        "unstaged": f.has_unstaged_changes,
        "tracked": f.tracked,
        "deleted": f.deleted,
        "merge_conflict": f.has_merge_conflicts,
        "inline_merge_conflict": f.has_inline_merge_conflicts,
        "rename": f.is_rename,
    }


def to_dict(files: Sequence[FileState]) -> Dict[str, Any]:
    """Convert a file list to a JSON-serialisable dict."""
    files_list: List[Dict[str, Any]] = [file_to_dict(f) for f in files]
    return {
        "version": "1.0",
        "total_files": len(files_list),
        "staged": sum(1 for f in files if f.has_staged_changes),
        "unstaged": sum(1 for f in files if f.has_unstaged_changes),
        "files": files_list,
    }


def render(files: Sequence[FileState]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(files), indent=2)
