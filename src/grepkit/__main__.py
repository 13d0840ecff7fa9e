"""Allow ``python -m grepkit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m grepkit`` behaves identically to the ``grepkit`` console
script.
"""

from __future__ import annotations

from grepkit.cli.app import cli

if __name__ == "__main__":
    cli()
