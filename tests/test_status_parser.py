"""Tests for porcelain status decoding and record parsing."""

import pytest

from gitstate.git.models import FileKind, StatusFlags
from gitstate.git.status_parser import (
    STATUS_TABLE,
    decode_status_code,
    parse_status_line,
    unquote_path,
)

# code: (staged, unstaged, tracked, deleted, conflict, inline conflict)
DECODING_TABLE = {
    "??": (False, True, False, False, False, False),
    "A ": (True, False, False, False, False, False),
    "AM": (True, True, False, False, False, False),
    " M": (False, True, True, False, False, False),
    "M ": (True, False, True, False, False, False),
    "MM": (True, True, True, False, False, False),
    " D": (False, True, True, True, False, False),
    "D ": (True, False, True, True, False, False),
    "AD": (True, True, True, True, False, False),
    "R ": (True, False, True, False, False, False),
    "RM": (True, True, True, False, False, False),
    "C ": (True, False, True, False, False, False),
    " T": (False, True, True, False, False, False),
    "DD": (True, True, True, True, True, False),
    "AA": (True, True, True, False, True, True),
    "UU": (False, True, True, False, True, True),
    "AU": (True, True, True, False, True, False),
    "UA": (False, True, True, False, True, False),
    "UD": (False, True, True, True, True, False),
    "DU": (True, True, True, True, True, False),
}


class TestDecodeStatusCode:
    @pytest.mark.parametrize("code", sorted(DECODING_TABLE))
    def test_decoding_table(self, code):
        staged, unstaged, tracked, deleted, conflict, inline = DECODING_TABLE[code]
        flags = decode_status_code(code)
        assert flags == StatusFlags(
            has_staged_changes=staged,
            has_unstaged_changes=unstaged,
            tracked=tracked,
            deleted=deleted,
            has_merge_conflicts=conflict,
            has_inline_merge_conflicts=inline,
        )

    def test_table_covers_every_documented_code(self):
        assert set(DECODING_TABLE) <= set(STATUS_TABLE)
        assert "  " not in STATUS_TABLE

    def test_inline_conflict_is_subset_of_conflict(self):
        for flags in STATUS_TABLE.values():
            if flags.has_inline_merge_conflicts:
                assert flags.has_merge_conflicts

    def test_unknown_code_does_not_raise(self):
        flags = decode_status_code("XY")
        assert flags.tracked is True
        assert flags.has_staged_changes is True
        assert flags.has_unstaged_changes is True
        assert flags.deleted is False
        assert flags.has_merge_conflicts is False


class TestParseStatusLine:
    def test_untracked_file(self, fixed_kind):
        f = parse_status_line("?? newfile.txt", fixed_kind)
        assert f.name == "newfile.txt"
        assert f.tracked is False
        assert f.has_staged_changes is False
        assert f.has_unstaged_changes is True

    def test_modified_file(self, fixed_kind):
        f = parse_status_line(" M edited.txt", fixed_kind)
        assert f.name == "edited.txt"
        assert f.tracked is True
        assert f.has_staged_changes is False
        assert f.has_unstaged_changes is True

    def test_raw_fields_retained(self, fixed_kind):
        f = parse_status_line("MM src/app.py", fixed_kind)
        assert f.display_string == "MM src/app.py"
        assert f.short_status == "MM"
        assert len(f.short_status) == 2

    def test_classifier_receives_name(self):
        seen = []

        def classify(path):
            seen.append(path)
            return FileKind.DIRECTORY

        f = parse_status_line("?? build/", classify)
        assert seen == ["build/"]
        assert f.kind == FileKind.DIRECTORY

    def test_rename_keeps_composite_name(self, fixed_kind):
        f = parse_status_line("R  old.py -> new.py", fixed_kind)
        assert f.name == "old.py -> new.py"
        assert f.is_rename
        assert f.names() == ["old.py", "new.py"]

    def test_quoted_path_unquoted(self, fixed_kind):
        f = parse_status_line('?? "with space.txt"', fixed_kind)
        assert f.name == "with space.txt"
        assert f.display_string == '?? "with space.txt"'


class TestUnquotePath:
    def test_plain_path_unchanged(self):
        assert unquote_path("src/app.py") == "src/app.py"

    def test_octal_utf8(self):
        assert unquote_path('"caf\\303\\251.txt"') == "café.txt"

    def test_simple_escapes(self):
        assert unquote_path('"tab\\there"') == "tab\there"
        assert unquote_path('"quote\\"d"') == 'quote"d'
        assert unquote_path('"back\\\\slash"') == "back\\slash"

    def test_rename_halves_unquoted_separately(self):
        assert unquote_path('"a b.txt" -> "c d.txt"') == "a b.txt -> c d.txt"
        assert unquote_path('plain.txt -> "new name.txt"') == "plain.txt -> new name.txt"

    def test_quoted_path_containing_arrow_is_one_path(self):
        assert unquote_path('"x -> y.txt"') == "x -> y.txt"
        assert unquote_path('"a -> b.txt" -> "c d.txt"') == "a -> b.txt -> c d.txt"


class TestArrowInFileName:
    def test_untracked_file_named_like_a_rename(self, fixed_kind):
        f = parse_status_line('?? "x -> y.txt"', fixed_kind)
        assert f.name == "x -> y.txt"
        assert f.is_rename is False
        assert f.names() == ["x -> y.txt"]

