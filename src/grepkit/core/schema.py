"""Declarative argument schema for grepkit.

The resolver builds its parser from this table; precedence rules live
here as data rather than as conditional chains.  Flags that share a
``group`` override each other: the one given last on the command line
wins and the rest are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

PROG: str = "grepkit"
DESCRIPTION: str = "Search files for lines matching a pattern."

OUTPUT_GROUP: str = "output"


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One boolean flag of the command line."""

    name: str
    """Schema name, also the key used in :class:`RawMatches.flags`."""

    short: str
    long: str
    help: str
    group: str | None = None
    """Override group, or ``None`` for a standalone flag."""

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")


@dataclass(frozen=True, slots=True)
class PositionalSpec:
    """One positional parameter of the command line."""

    name: str
    metavar: str
    help: str
    required: bool
    variadic: bool = False


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

POSITIONALS: tuple[PositionalSpec, ...] = (
    PositionalSpec(
        name="pattern",
        metavar="PATTERN",
        help="pattern to search for",
        required=True,
    ),
    PositionalSpec(
        name="files",
        metavar="FILE",
        help="files to search (default: standard input)",
        required=False,
        variadic=True,
    ),
)

FLAGS: tuple[FlagSpec, ...] = (
    # Matching flags
    FlagSpec(
        name="invert-match",
        short="-v",
        long="--invert-match",
        help="inverse matching",
    ),
    FlagSpec(
        name="ignore-case",
        short="-i",
        long="--ignore-case",
        help="case insensitive matching",
    ),
    # Output flags
    FlagSpec(
        name="only-matching",
        short="-o",
        long="--only-matching",
        help="print the matched bytes of each match",
        group=OUTPUT_GROUP,
    ),
    FlagSpec(
        name="byte-offset",
        short="-b",
        long="--byte-offset",
        help="print the byte offset of each match",
        group=OUTPUT_GROUP,
    ),
    FlagSpec(
        name="files-with-matches",
        short="-l",
        long="--files-with-matches",
        help="print the name of the matched files",
        group=OUTPUT_GROUP,
    ),
    FlagSpec(
        name="files-without-matches",
        short="-L",
        long="--files-without-matches",
        help="print the name of non-matched files (equivalent to -vl)",
        group=OUTPUT_GROUP,
    ),
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_flag(name: str) -> FlagSpec:
    """Return the flag called *name*; ``KeyError`` if the schema lacks it."""
    for spec in FLAGS:
        if spec.name == name:
            return spec
    raise KeyError(name)


def override_group(name: str) -> tuple[str, ...]:
    """Return the names of the flags *name* overrides, in schema order."""
    spec = get_flag(name)
    if spec.group is None:
        return ()
    return tuple(
        other.name
        for other in FLAGS
        if other.group == spec.group and other.name != name
    )
