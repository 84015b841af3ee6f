"""Load and merge configuration from .gitstate.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitstate.config.schema import (
    LOG_LEVELS,
    UNTRACKED_MODES,
    GitStateConfig,
    HistoryConfig,
    LoggingConfig,
    StatusConfig,
)

CONFIG_FILENAME = ".gitstate.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: GitStateConfig) -> None:
    """Apply GITSTATE_* environment variable overrides."""
    if val := os.environ.get("GITSTATE_TRUNK_BRANCHES"):
        cfg.history.trunk_branches = [b.strip() for b in val.split(",") if b.strip()]
    if val := os.environ.get("GITSTATE_INTEGRATION_BRANCH"):
        cfg.history.integration_branch = val.strip()
    if val := os.environ.get("GITSTATE_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.logging.level = val.upper()  # type: ignore[assignment]
    if os.environ.get("GITSTATE_NO_RENAMES") == "1":
        cfg.status.no_renames = True


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitStateConfig) -> None:
    if not isinstance(cfg.status.no_renames, bool):
        raise ConfigError("status.no_renames must be true or false")
    if cfg.status.default_untracked not in UNTRACKED_MODES:
        raise ConfigError(
            f"Invalid status.default_untracked: {cfg.status.default_untracked!r} "
            f"(expected one of {', '.join(UNTRACKED_MODES)})"
        )
    if not isinstance(cfg.history.trunk_branches, list) or not all(
        isinstance(b, str) for b in cfg.history.trunk_branches
    ):
        raise ConfigError("history.trunk_branches must be a list of branch names")
    if not isinstance(cfg.history.integration_branch, str) or not cfg.history.integration_branch:
        raise ConfigError("history.integration_branch must be a non-empty branch name")
    if not isinstance(cfg.logging.level, str) or cfg.logging.level.upper() not in LOG_LEVELS:
        raise ConfigError(f"Invalid logging.level: {cfg.logging.level}")
    cfg.logging.level = cfg.logging.level.upper()  # type: ignore[assignment]


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitStateConfig:
    """Load, validate, and return a GitStateConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitStateConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitStateConfig(
            version=raw.get("version", "1.0"),
            status=_build_section(raw, StatusConfig, "status"),
            history=_build_section(raw, HistoryConfig, "history"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
