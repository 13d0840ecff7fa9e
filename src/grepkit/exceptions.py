"""Custom exception hierarchy for grepkit.

Every user-visible error condition inherits from :class:`GrepkitError`
so that the CLI error boundary can render a clean message without
leaking internal stack traces.  Programming-contract violations (for
example building a :class:`~grepkit.core.models.SearchRequest` without
a pattern) are plain ``ValueError`` and are not part of this tree.

Hierarchy
---------
GrepkitError
├── ParseError
└── SearchEngineError
"""

from __future__ import annotations


class GrepkitError(Exception):
    """Base exception for all grepkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation --------------------------------------------------------------

class ParseError(GrepkitError):
    """Raised when the argument list is not a well-formed invocation.

    Covers a missing or empty pattern, unknown flags and any other token
    the argument schema rejects.  Help and version requests are never
    reported through this exception.
    """


# --- Search engine -----------------------------------------------------------

class SearchEngineError(GrepkitError):
    """Raised by a search engine when it cannot process a request."""
