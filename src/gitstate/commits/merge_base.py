"""Pick the commit a history view compares against."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from gitstate.git.runner import GIT, CommandRunner, GitError

DEFAULT_TRUNK_BRANCHES = ("master", "main")
DEFAULT_INTEGRATION_BRANCH = "develop"


def current_branch_name(runner: CommandRunner) -> str:
    """Return the short name of the checked-out branch. Raises GitError."""
    return runner.run(GIT, ["symbolic-ref", "--short", "HEAD"]).strip()


def comparison_target(
    branch: str,
    trunk_branches: Sequence[str] = DEFAULT_TRUNK_BRANCHES,
    integration_branch: str = DEFAULT_INTEGRATION_BRANCH,
) -> str:
    """Trunk branches compare against themselves, everything else against integration."""
    if branch in trunk_branches:
        return branch
    return integration_branch


def resolve_comparison_commit(
    runner: CommandRunner,
    ref: str = "HEAD",
    *,
    trunk_branches: Sequence[str] = DEFAULT_TRUNK_BRANCHES,
    integration_branch: str = DEFAULT_INTEGRATION_BRANCH,
) -> str:
    """Return the merge-base of *ref* and the checked-out branch's comparison target.

    A missing merge-base (unrelated histories, absent comparison branch)
    yields an empty string. Failure to resolve the current branch raises
    GitError.
    """
    branch = current_branch_name(runner)
    target = comparison_target(branch, trunk_branches, integration_branch)
    logger.debug(f"Comparing {ref} against {target} (on {branch})")

    try:
        output = runner.run(GIT, ["merge-base", ref, target])
    except GitError as exc:
        logger.warning(f"no merge-base for {ref} and {target}: {exc}")
        return ""
    return output.strip()
