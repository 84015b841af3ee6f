"""Merge a previous file list with a freshly built one.

Reconciliation is split into three layers:

* ``match_files``: keep new entries that correspond to an old entry,
  in the old list's order.
* ``should_wait_for_matching_file``: the cursor-continuity policy that
  holds back a rename entry until the selected file's own slot is reached.
* ``sort_by_staged``: the display ordering, re-applied last.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from gitstate.files.builder import sort_by_staged
from gitstate.git.models import FileState


def should_wait_for_matching_file(
    old_file: FileState,
    new_file: FileState,
    selected: Optional[FileState],
) -> bool:
    """True if *new_file* should not be claimed by *old_file* yet.

    Staging ``B`` can turn ``A`` and ``B`` into a single ``A -> B`` entry.
    While the user has ``B`` selected, the rename entry must wait for the
    old ``B`` rather than be claimed by ``A``, so the cursor does not jump.
    """
    if selected is None:
        return False
    return (
        new_file.is_rename
        and not selected.is_rename
        and new_file.matches(selected)
        and not old_file.matches(selected)
    )


def match_files(
    old_files: Sequence[FileState],
    new_files: Sequence[FileState],
    selected: Optional[FileState] = None,
) -> List[FileState]:
    """Return the new entries that match an old one, in old-list order."""
    consumed: Set[int] = set()
    result: List[FileState] = []

    for old_file in old_files:
        for new_index, new_file in enumerate(new_files):
            if new_index in consumed:
                continue
            if old_file.matches(new_file) and not should_wait_for_matching_file(
                old_file, new_file, selected
            ):
                result.append(new_file)
                consumed.add(new_index)
    return result


def reconcile(
    old_files: Sequence[FileState],
    new_files: List[FileState],
    selected: Optional[FileState] = None,
) -> List[FileState]:
    """Reconcile *new_files* against the previously displayed *old_files*."""
    if not old_files:
        return new_files
    return sort_by_staged(match_files(old_files, new_files, selected))
