"""Argument resolver — schema-driven parsing of the raw token list.

The parser is generated from :mod:`grepkit.core.schema` and runs with
every side effect removed: help and version render to values instead of
printing, and usage errors raise :class:`~grepkit.exceptions.ParseError`
instead of exiting the process.

Override groups are honoured by :class:`_FlagAction`: argparse invokes
actions in command-line order, so each flag clearing the rest of its
group leaves exactly the last one standing.  This holds for long and
short spellings alike and for clustered short flags (``-ob``).
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import Any, NoReturn

from grepkit.core.assembler import assemble
from grepkit.core.models import Command, HelpRequest, RawMatches, VersionRequest
from grepkit.core.schema import (
    DESCRIPTION,
    FLAGS,
    POSITIONALS,
    PROG,
    FlagSpec,
    PositionalSpec,
    override_group,
)
from grepkit.exceptions import ParseError
from grepkit.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Control-flow signals
# ---------------------------------------------------------------------------

class _Rendered(Exception):
    """Unwinds the parser once help or version text has been rendered."""

    def __init__(self, request: HelpRequest | VersionRequest) -> None:
        super().__init__(request.text)
        self.request = request


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class _FlagAction(argparse.Action):
    """Boolean flag that clears the other members of its override group."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        overrides: Sequence[str] = (),
        default: bool = False,
        required: bool = False,
        help: str | None = None,
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            default=default,
            required=required,
            help=help,
        )
        self.overrides: tuple[str, ...] = tuple(overrides)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        for other in self.overrides:
            if getattr(namespace, other, False):
                logger.debug(
                    "%s overrides earlier --%s", option_string, other.replace("_", "-"),
                )
                setattr(namespace, other, False)
        setattr(namespace, self.dest, True)


class _HelpAction(argparse.Action):
    """Renders the help of *display*, or of the invoking parser."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = argparse.SUPPRESS,
        display: argparse.ArgumentParser | None = None,
        help: str | None = None,
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=argparse.SUPPRESS,
            nargs=0,
            help=help,
        )
        self.display = display

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        source = self.display if self.display is not None else parser
        raise _Rendered(HelpRequest(source.format_help()))


class _VersionAction(argparse.Action):
    def __init__(
        self,
        option_strings: Sequence[str],
        version: str,
        dest: str = argparse.SUPPRESS,
        help: str | None = None,
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=argparse.SUPPRESS,
            nargs=0,
            help=help,
        )
        self.version = version

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        raise _Rendered(VersionRequest(f"{parser.prog} {self.version}"))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class _ResolverParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(
            f"{message}\n\n{self.format_usage().rstrip()}",
            hint=f"Run '{self.prog} --help' for more information.",
        )

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        """Raise :class:`ParseError`; the registered actions never exit."""
        raise ParseError(message or f"{self.prog}: exited with status {status}")


def _nargs(spec: PositionalSpec) -> str | None:
    if spec.variadic:
        return "+" if spec.required else "*"
    return None if spec.required else "?"


def _build_parser(
    flags: Sequence[FlagSpec],
    positionals: Sequence[PositionalSpec],
    *,
    prog: str,
    version: str,
    display: argparse.ArgumentParser | None = None,
) -> _ResolverParser:
    """Build a parser for *flags* and *positionals*.

    With *display* given, usage and help text are taken from it; the
    options-only parser uses this to describe the full command line.
    """
    kwargs: dict[str, Any] = {}
    if sys.version_info >= (3, 14):
        kwargs["color"] = False
    if display is not None:
        kwargs["usage"] = display.format_usage().removeprefix("usage: ").rstrip()
    parser = _ResolverParser(
        prog=prog,
        description=DESCRIPTION,
        add_help=False,
        allow_abbrev=False,
        **kwargs,
    )

    for pos in positionals:
        parser.add_argument(
            pos.name,
            metavar=pos.metavar,
            nargs=_nargs(pos),
            default=[] if pos.variadic else None,
            help=pos.help,
        )

    matching = parser.add_argument_group("matching")
    output = parser.add_argument_group("output")
    for spec in flags:
        group = output if spec.group is not None else matching
        group.add_argument(
            spec.short,
            spec.long,
            dest=spec.dest,
            action=_FlagAction,
            overrides=[other.replace("-", "_") for other in override_group(spec.name)],
            help=spec.help,
        )

    info = parser.add_argument_group("information")
    info.add_argument(
        "-h",
        "--help",
        action=_HelpAction,
        display=display,
        help="show this help message and exit",
    )
    info.add_argument(
        "-V",
        "--version",
        action=_VersionAction,
        version=version,
        help="show version information and exit",
    )
    return parser


# ---------------------------------------------------------------------------
# Token splitting
# ---------------------------------------------------------------------------

_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


def _is_option(token: str) -> bool:
    return token.startswith("-") and token != "-" and not _NEGATIVE_NUMBER.match(token)


def _split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate options from operands, keeping each side in order.

    Options and operands may be interleaved on the command line
    (``foo -i a.txt``).  The first ``--`` ends option parsing; every
    token after it, including a further ``--``, is an operand.
    """
    options: list[str] = []
    operands: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            operands.extend(tokens)
            break
        if _is_option(token):
            options.append(token)
        else:
            operands.append(token)
    return options, operands


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class ArgumentResolver:
    """Parses token lists against the grepkit argument schema.

    argparse sees only the options; operands are assigned to the
    positionals directly so that no operand is ever reinterpreted.
    Instances hold no per-call state; :meth:`resolve` and :meth:`parse`
    may be called any number of times.
    """

    def __init__(
        self,
        flags: Sequence[FlagSpec] = FLAGS,
        positionals: Sequence[PositionalSpec] = POSITIONALS,
        *,
        prog: str = PROG,
        version: str = __version__,
    ) -> None:
        self._flags = tuple(flags)
        self._required = tuple(pos.metavar for pos in positionals if pos.required)
        self._display = _build_parser(self._flags, positionals, prog=prog, version=version)
        self._parser = _build_parser(
            self._flags, (), prog=prog, version=version, display=self._display,
        )

    def format_usage(self) -> str:
        return self._display.format_usage()

    def format_help(self) -> str:
        return self._display.format_help()

    def resolve(self, argv: Sequence[str]) -> HelpRequest | VersionRequest | RawMatches:
        """Parse *argv* into raw matched values.

        Returns a :class:`HelpRequest` or :class:`VersionRequest` when
        one of the information flags is present, :class:`RawMatches`
        otherwise.

        Raises
        ------
        ParseError
            When *argv* is not a well-formed invocation.
        """
        options, operands = _split_tokens(argv)
        try:
            namespace = self._parser.parse_args(options)
        except _Rendered as rendered:
            logger.debug("information request: %s", type(rendered.request).__name__)
            return rendered.request

        if not operands:
            self._parser.error(
                f"the following arguments are required: {', '.join(self._required)}"
            )
        pattern, *files = operands
        if not pattern:
            self._parser.error("the pattern must not be empty")

        present = frozenset(spec.name for spec in self._flags if getattr(namespace, spec.dest))
        logger.debug("flags after override resolution: %s", sorted(present))
        return RawMatches(pattern=pattern, files=tuple(files), flags=present)

    def parse(self, argv: Sequence[str]) -> Command:
        """Parse *argv* into a :data:`~grepkit.core.models.Command`."""
        result = self.resolve(argv)
        if isinstance(result, RawMatches):
            return assemble(result)
        return result


def parse(argv: Sequence[str]) -> Command:
    """Parse *argv* (program name excluded) with the default schema.

    Raises
    ------
    ParseError
        On a missing or empty pattern, an unknown flag, or any other
        malformed invocation.
    """
    return ArgumentResolver().parse(argv)
