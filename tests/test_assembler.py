"""Tests for the pure configuration assembler (core/assembler.py).

Every test is a pure function call — no parsing, no I/O.  These tests
exercise:

* stdin defaulting of the file list
* output-mode priority
* the inverse truth table, including ``-v -L`` cancellation
* case folding
"""

from __future__ import annotations

import pytest

from grepkit.core.assembler import (
    assemble,
    resolve_files,
    resolve_inverse,
    resolve_output_mode,
)
from grepkit.core.models import MatchOptions, OutputMode, RawMatches, SearchRequest


def _raw(*flags: str, pattern: str | None = "foo", files: tuple[str, ...] = ()) -> RawMatches:
    return RawMatches(pattern=pattern, files=files, flags=frozenset(flags))


# ---------------------------------------------------------------------------
# resolve_files
# ---------------------------------------------------------------------------

class TestResolveFiles:
    def test_empty_becomes_stdin(self) -> None:
        assert resolve_files(()) == ("-",)

    def test_operands_kept_in_order(self) -> None:
        assert resolve_files(("b.txt", "a.txt", "b.txt")) == ("b.txt", "a.txt", "b.txt")

    def test_explicit_dash_kept(self) -> None:
        assert resolve_files(("-", "a.txt")) == ("-", "a.txt")


# ---------------------------------------------------------------------------
# resolve_output_mode
# ---------------------------------------------------------------------------

class TestResolveOutputMode:
    def test_default_is_file_name(self) -> None:
        assert resolve_output_mode(frozenset()) is OutputMode.FILE_NAME

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            ("only-matching", OutputMode.MATCHED_BYTES),
            ("byte-offset", OutputMode.BYTE_OFFSET),
            ("files-with-matches", OutputMode.FILE_NAME),
            ("files-without-matches", OutputMode.FILE_NAME),
        ],
    )
    def test_single_flag(self, flag: str, expected: OutputMode) -> None:
        assert resolve_output_mode(frozenset({flag})) is expected

    def test_only_matching_has_top_priority(self) -> None:
        flags = frozenset({"byte-offset", "only-matching", "files-with-matches"})
        assert resolve_output_mode(flags) is OutputMode.MATCHED_BYTES

    def test_byte_offset_beats_file_name_flags(self) -> None:
        flags = frozenset({"files-without-matches", "byte-offset"})
        assert resolve_output_mode(flags) is OutputMode.BYTE_OFFSET

    def test_unrelated_flags_ignored(self) -> None:
        flags = frozenset({"ignore-case", "invert-match"})
        assert resolve_output_mode(flags) is OutputMode.FILE_NAME


# ---------------------------------------------------------------------------
# resolve_inverse
# ---------------------------------------------------------------------------

class TestResolveInverse:
    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ((), False),
            (("invert-match",), True),
            (("files-without-matches",), True),
            (("invert-match", "files-without-matches"), False),
        ],
    )
    def test_truth_table(self, flags: tuple[str, ...], expected: bool) -> None:
        assert resolve_inverse(frozenset(flags)) is expected

    def test_files_with_matches_does_not_invert(self) -> None:
        assert resolve_inverse(frozenset({"files-with-matches"})) is False


# ---------------------------------------------------------------------------
# assemble
# ---------------------------------------------------------------------------

class TestAssemble:
    def test_plain_search(self) -> None:
        assert assemble(_raw(files=("a.txt",))) == SearchRequest(
            options=MatchOptions(),
            pattern="foo",
            files=("a.txt",),
        )

    def test_ignore_case(self) -> None:
        req = assemble(_raw("ignore-case"))
        assert req.options.case_insensitive is True
        assert req.options.inverse is False

    def test_files_without_matches(self) -> None:
        req = assemble(_raw("files-without-matches"))
        assert req.options == MatchOptions(
            inverse=True,
            case_insensitive=False,
            output=OutputMode.FILE_NAME,
        )
        assert req.files == ("-",)

    def test_missing_pattern_is_a_caller_bug(self) -> None:
        with pytest.raises(ValueError, match="pattern"):
            assemble(_raw(pattern=None))
