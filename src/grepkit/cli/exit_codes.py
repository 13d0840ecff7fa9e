"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — help, version, or a search the engine reported as done."""

GENERAL_ERROR: int = 1
"""A known GrepkitError other than a usage error was caught."""

USAGE_ERROR: int = 2
"""The argument list was malformed.  Matches the argparse convention."""

UNEXPECTED_ERROR: int = 3
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
