"""Configuration assembler — derives the final search command.

Every function in this module is a **pure** transformation of
:class:`~grepkit.core.models.RawMatches`: no I/O, no side effects, fully
deterministic.

Derivation rules
----------------
1. **Files** — operands in the order given, or ``("-",)`` for stdin.
2. **Output mode** — first present flag in :data:`OUTPUT_PRIORITY`.
3. **Inverse** — ``invert-match`` XOR ``files-without-matches``.
4. **Case folding** — mirrors ``ignore-case``.
"""

from __future__ import annotations

import logging
from collections.abc import Set

from grepkit.core.models import (
    STDIN_SENTINEL,
    MatchOptions,
    OutputMode,
    RawMatches,
    SearchRequest,
)

logger = logging.getLogger(__name__)

OUTPUT_PRIORITY: tuple[tuple[str, OutputMode], ...] = (
    ("only-matching", OutputMode.MATCHED_BYTES),
    ("byte-offset", OutputMode.BYTE_OFFSET),
    ("files-with-matches", OutputMode.FILE_NAME),
    ("files-without-matches", OutputMode.FILE_NAME),
)
"""Output flags in priority order; the first one present decides."""

DEFAULT_OUTPUT: OutputMode = OutputMode.FILE_NAME


# ---------------------------------------------------------------------------
# 1. Files
# ---------------------------------------------------------------------------

def resolve_files(files: tuple[str, ...]) -> tuple[str, ...]:
    if not files:
        logger.debug("no file operands, reading standard input")
        return (STDIN_SENTINEL,)
    return files


# ---------------------------------------------------------------------------
# 2. Output mode
# ---------------------------------------------------------------------------

def resolve_output_mode(flags: Set[str]) -> OutputMode:
    """Return the output mode selected by *flags*.

    ``files-without-matches`` shares ``FILE_NAME`` with
    ``files-with-matches``; its distinguishing effect lives entirely in
    :func:`resolve_inverse`.
    """
    for name, mode in OUTPUT_PRIORITY:
        if name in flags:
            return mode
    return DEFAULT_OUTPUT


# ---------------------------------------------------------------------------
# 3. Inverse
# ---------------------------------------------------------------------------

def resolve_inverse(flags: Set[str]) -> bool:
    """Return whether matching is inverted.

    ``-L`` means ``-vl``, so combining it with ``-v`` inverts twice and
    cancels out.
    """
    return ("invert-match" in flags) ^ ("files-without-matches" in flags)


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def assemble(raw: RawMatches) -> SearchRequest:
    """Build the :class:`SearchRequest` described by *raw*.

    Raises ``ValueError`` if *raw* carries no pattern; the resolver
    never produces such a value.
    """
    if not raw.pattern:
        raise ValueError("cannot assemble a search request without a pattern")

    options = MatchOptions(
        inverse=resolve_inverse(raw.flags),
        case_insensitive=raw.is_present("ignore-case"),
        output=resolve_output_mode(raw.flags),
    )
    logger.debug(
        "resolved options: inverse=%s case_insensitive=%s output=%s",
        options.inverse,
        options.case_insensitive,
        options.output.value,
    )
    return SearchRequest(
        options=options,
        pattern=raw.pattern,
        files=resolve_files(raw.files),
    )
