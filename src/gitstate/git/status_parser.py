"""Porcelain v1 status record parser.

A record is ``XY <path>`` where ``X`` is the index (staged) column and
``Y`` the worktree (unstaged) column. The code is decoded through a
lookup table of every documented porcelain code; anything else goes
through the same rules, so the decoder never raises.
"""

from __future__ import annotations

import re
from itertools import product
from typing import Dict

from gitstate.git.filetype import Classifier
from gitstate.git.models import RENAME_SEPARATOR, FileState, StatusFlags

_UNTRACKED_CODES = frozenset({"??", "A ", "AM"})
_NO_STAGED_CHARS = frozenset({" ", "U", "?"})
_MERGE_CONFLICT_CODES = frozenset({"DD", "AA", "UU", "AU", "UA", "UD", "DU"})
_INLINE_MERGE_CONFLICT_CODES = frozenset({"UU", "AA"})

_CHANGE_CHARS = " MTADRC"

_QUOTED = r'"(?:\\.|[^"\\])*"'
_QUOTED_PATH_RE = re.compile(_QUOTED)
_RENAME_PATH_RE = re.compile(rf"^({_QUOTED}|.+?){RENAME_SEPARATOR}({_QUOTED}|.+)$")
_OCTAL_ESCAPE_RE = re.compile(r"\\([0-7]{1,3})")
_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "\\": "\\",
}


def _derive_flags(code: str) -> StatusFlags:
    staged, unstaged = code[0], code[1]
    return StatusFlags(
        has_staged_changes=staged not in _NO_STAGED_CHARS,
        has_unstaged_changes=unstaged != " ",
        tracked=code not in _UNTRACKED_CODES,
        deleted=staged == "D" or unstaged == "D",
        has_merge_conflicts=code in _MERGE_CONFLICT_CODES,
        has_inline_merge_conflicts=code in _INLINE_MERGE_CONFLICT_CODES,
    )


def _known_codes() -> list[str]:
    codes = ["".join(pair) for pair in product(_CHANGE_CHARS, repeat=2) if pair != (" ", " ")]
    codes.extend(sorted(_MERGE_CONFLICT_CODES))
    codes.extend(["??", "!!"])
    return codes


STATUS_TABLE: Dict[str, StatusFlags] = {code: _derive_flags(code) for code in _known_codes()}


def decode_status_code(code: str) -> StatusFlags:
    """Return the flags for a two-character status code."""
    flags = STATUS_TABLE.get(code)
    if flags is None:
        flags = _derive_flags(code)
    return flags


def _unquote_part(part: str) -> str:
    if len(part) < 2 or not (part.startswith('"') and part.endswith('"')):
        return part
    inner = part[1:-1]

    out = bytearray()
    idx = 0
    while idx < len(inner):
        char = inner[idx]
        if char != "\\" or idx + 1 == len(inner):
            out.extend(char.encode("utf-8"))
            idx += 1
            continue
        m = _OCTAL_ESCAPE_RE.match(inner, idx)
        if m:
            out.append(int(m.group(1), 8) & 0xFF)
            idx = m.end()
            continue
        nxt = inner[idx + 1]
        out.extend(_SIMPLE_ESCAPES.get(nxt, "\\" + nxt).encode("utf-8"))
        idx += 2
    return out.decode("utf-8", errors="replace")


def unquote_path(path: str) -> str:
    """Undo git's C-style quoting, per half for ``old -> new`` renames.

    A single quoted string is one path even when it contains ``" -> "``.
    """
    if _QUOTED_PATH_RE.fullmatch(path):
        return _unquote_part(path)
    m = _RENAME_PATH_RE.match(path)
    if m:
        return f"{_unquote_part(m.group(1))}{RENAME_SEPARATOR}{_unquote_part(m.group(2))}"
    return _unquote_part(path)


def parse_status_line(line: str, classify: Classifier) -> FileState:
    """Decode one ``XY <path>`` record into a FileState.

    The caller guarantees the record is at least three characters long.
    """
    code = line[:2]
    name = unquote_path(line[3:])
    flags = decode_status_code(code)
    return FileState(
        name=name,
        display_string=line,
        short_status=code,
        has_staged_changes=flags.has_staged_changes,
        has_unstaged_changes=flags.has_unstaged_changes,
        tracked=flags.tracked,
        deleted=flags.deleted,
        has_merge_conflicts=flags.has_merge_conflicts,
        has_inline_merge_conflicts=flags.has_inline_merge_conflicts,
        kind=classify(name),
    )
