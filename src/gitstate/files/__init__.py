"""File list building and reconciliation."""

from gitstate.files.builder import (
    build_file_list,
    get_status_text,
    sort_by_staged,
    split_status_lines,
    status_args,
)
from gitstate.files.reconciler import match_files, reconcile, should_wait_for_matching_file

__all__ = [
    "build_file_list",
    "get_status_text",
    "match_files",
    "reconcile",
    "should_wait_for_matching_file",
    "sort_by_staged",
    "split_status_lines",
    "status_args",
]
