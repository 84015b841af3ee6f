"""Starter .gitstate.toml template."""

DEFAULT_TOML = """\
# gitstate configuration
version = "1.0"

[status]
no_renames = false
default_untracked = "all"   # no | normal | all, when status.showUntrackedFiles is unset

[history]
trunk_branches = ["master", "main"]   # compared against themselves
integration_branch = "develop"        # comparison target for every other branch

[logging]
level = "WARNING"
"""
