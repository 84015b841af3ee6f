"""Structured working-tree status and merge-base resolution for git."""

__version__ = "0.1.0"
