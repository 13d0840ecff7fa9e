"""Domain models for grepkit.

All models are **frozen** dataclasses — immutable value objects built
once per invocation from the argument list.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

STDIN_SENTINEL: str = "-"
"""File operand meaning "read from standard input"."""


# ---------------------------------------------------------------------------
# Matching options
# ---------------------------------------------------------------------------

class OutputMode(enum.Enum):
    """Which property of a match the search engine prints."""

    FILE_NAME = "file-name"
    """Print the names of matching files (default)."""

    MATCHED_BYTES = "matched-bytes"
    """Print the matched substring."""

    BYTE_OFFSET = "byte-offset"
    """Print the byte offset of each match."""


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Resolved matching behaviour handed to the search engine."""

    inverse: bool = False
    """Report non-matches instead of matches."""

    case_insensitive: bool = False
    """Fold case while matching."""

    output: OutputMode = OutputMode.FILE_NAME


# ---------------------------------------------------------------------------
# Resolver hand-off
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawMatches:
    """Values matched by the argument resolver, before derivation.

    ``flags`` holds the schema names of the boolean flags still present
    once override groups have been resolved.
    """

    pattern: str | None
    files: tuple[str, ...] = ()
    flags: frozenset[str] = frozenset()

    def is_present(self, name: str) -> bool:
        return name in self.flags


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpRequest:
    """The user asked for usage text."""

    text: str


@dataclass(frozen=True, slots=True)
class VersionRequest:
    """The user asked for version information."""

    text: str


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A fully resolved search, ready for the search engine.

    Raises ``ValueError`` when constructed with an empty pattern or an
    empty file list; both are caller bugs, not user errors.
    """

    options: MatchOptions
    pattern: str
    files: tuple[str, ...] = (STDIN_SENTINEL,)

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("SearchRequest requires a non-empty pattern")
        if not self.files:
            raise ValueError("SearchRequest requires at least one file operand")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable view of the request."""
        return {
            "options": {
                "inverse": self.options.inverse,
                "case_insensitive": self.options.case_insensitive,
                "output": self.options.output.value,
            },
            "pattern": self.pattern,
            "files": list(self.files),
        }


Command = HelpRequest | VersionRequest | SearchRequest
