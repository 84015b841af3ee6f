"""Commit history helpers."""

from gitstate.commits.merge_base import (
    DEFAULT_INTEGRATION_BRANCH,
    DEFAULT_TRUNK_BRANCHES,
    comparison_target,
    current_branch_name,
    resolve_comparison_commit,
)

__all__ = [
    "DEFAULT_INTEGRATION_BRANCH",
    "DEFAULT_TRUNK_BRANCHES",
    "comparison_target",
    "current_branch_name",
    "resolve_comparison_commit",
]
