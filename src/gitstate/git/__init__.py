"""Git interface layer — runner, status parsing, models."""

from gitstate.git.filetype import Classifier, classify_path, make_classifier
from gitstate.git.models import FileKind, FileState, StatusFlags
from gitstate.git.runner import (
    GIT,
    CommandRunner,
    ConfigReader,
    GitConfigReader,
    GitError,
    GitRunner,
    get_repo_root,
)
from gitstate.git.status_parser import (
    STATUS_TABLE,
    decode_status_code,
    parse_status_line,
    unquote_path,
)

__all__ = [
    "GIT",
    "STATUS_TABLE",
    "Classifier",
    "CommandRunner",
    "ConfigReader",
    "FileKind",
    "FileState",
    "GitConfigReader",
    "GitError",
    "GitRunner",
    "StatusFlags",
    "classify_path",
    "decode_status_code",
    "get_repo_root",
    "make_classifier",
    "parse_status_line",
    "unquote_path",
]
