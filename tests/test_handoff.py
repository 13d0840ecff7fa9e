"""Tests for the JSON hand-off engine (cli/handoff.py)."""

from __future__ import annotations

import io
import json

from grepkit.cli import exit_codes
from grepkit.cli.handoff import JsonHandoffEngine
from grepkit.core.models import MatchOptions, OutputMode, SearchRequest


def _request(**overrides: object) -> SearchRequest:
    defaults: dict[str, object] = {
        "options": MatchOptions(output=OutputMode.MATCHED_BYTES),
        "pattern": "naïve",
        "files": ("a.txt", "-"),
    }
    defaults.update(overrides)
    return SearchRequest(**defaults)  # type: ignore[arg-type]


class TestJsonHandoffEngine:
    def test_writes_one_json_line(self) -> None:
        stream = io.StringIO()
        code = JsonHandoffEngine(stream).search(_request())
        assert code == exit_codes.SUCCESS
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == _request().to_dict()

    def test_non_ascii_pattern_kept_verbatim(self) -> None:
        stream = io.StringIO()
        JsonHandoffEngine(stream).search(_request())
        assert "naïve" in stream.getvalue()

    def test_satisfies_search_engine_protocol(self) -> None:
        from grepkit.core.protocols import SearchEngine

        engine: SearchEngine = JsonHandoffEngine(io.StringIO())
        assert engine.search(_request(pattern="x")) == exit_codes.SUCCESS
