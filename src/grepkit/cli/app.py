"""CLI application entry point for grepkit.

This module is the **sole error boundary** for the application.  It
catches :class:`~grepkit.exceptions.GrepkitError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders them via Rich, and returns
well-defined exit codes.

Architecture notes
------------------
* No resolution logic lives here — parsing and derivation belong to
  :mod:`grepkit.core`.
* This module is the only place that reads ``sys.argv`` and the
  environment, and the only place that translates outcomes into the OS
  process exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from grepkit.cli import exit_codes
from grepkit.cli.console import print_error, print_notice, print_text
from grepkit.cli.handoff import JsonHandoffEngine
from grepkit.cli.logging_setup import configure_logging, log_level_from_env
from grepkit.core.models import HelpRequest, VersionRequest
from grepkit.core.protocols import SearchEngine
from grepkit.core.resolver import parse
from grepkit.exceptions import GrepkitError, ParseError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    engine: SearchEngine | None = None,
) -> int:
    """Run the grepkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, program name excluded.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    engine:
        Search backend receiving the resolved request.  Defaults to
        :class:`~grepkit.cli.handoff.JsonHandoffEngine`.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ParseError
        When *argv* is malformed; :func:`cli` renders it.
    """
    if argv is None:
        argv = sys.argv[1:]

    command = parse(argv)

    if isinstance(command, (HelpRequest, VersionRequest)):
        print_text(command.text)
        return exit_codes.SUCCESS

    if engine is None:
        engine = JsonHandoffEngine()
    logger.info("searching %d file operand(s)", len(command.files))
    return engine.search(command)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(
    argv: Sequence[str] | None = None,
    *,
    engine: SearchEngine | None = None,
) -> int:
    """Run :func:`main` and map every failure to an exit code."""
    try:
        return main(argv, engine=engine)
    except ParseError as exc:
        print_error(exc.message, exc.hint)
        return exit_codes.USAGE_ERROR
    except GrepkitError as exc:
        print_error(exc.message, exc.hint)
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        print_notice("Aborted by user.")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        print_error(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Console-script entry point.

    Configures logging from ``GREPKIT_LOG_LEVEL`` and guarantees the
    process never exits with a raw stack trace during normal usage.
    """
    configure_logging(log_level_from_env(os.environ))
    sys.exit(run())
