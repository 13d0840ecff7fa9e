"""grepkit — command-line surface of a grep-like search tool.

Turns raw process arguments into a validated, immutable search command
for an external matching engine.
"""

from grepkit.version import __version__

__all__: list[str] = ["__version__"]
