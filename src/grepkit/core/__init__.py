"""Core layer — argument schema, resolution and configuration assembly.

Rules
-----
* No ``print()`` calls and no process exit.
* No reads of ``sys.argv``, the environment or the filesystem.
* No imports from ``cli``.
"""

from grepkit.core.assembler import assemble
from grepkit.core.models import (
    STDIN_SENTINEL,
    Command,
    HelpRequest,
    MatchOptions,
    OutputMode,
    RawMatches,
    SearchRequest,
    VersionRequest,
)
from grepkit.core.protocols import SearchEngine
from grepkit.core.resolver import ArgumentResolver, parse

__all__: list[str] = [
    "STDIN_SENTINEL",
    "ArgumentResolver",
    "Command",
    "HelpRequest",
    "MatchOptions",
    "OutputMode",
    "RawMatches",
    "SearchEngine",
    "SearchRequest",
    "VersionRequest",
    "assemble",
    "parse",
]
