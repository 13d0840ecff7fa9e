"""Protocols (interfaces) at the edge of the core layer.

The core never performs a search itself; it hands a resolved
:class:`~grepkit.core.models.SearchRequest` to whatever satisfies
:class:`SearchEngine`.
"""

from __future__ import annotations

from typing import Protocol

from grepkit.core.models import SearchRequest


class SearchEngine(Protocol):
    """Contract for search backends.

    Any object that implements :meth:`search` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def search(self, request: SearchRequest) -> int:
        """Run *request* and return the process exit code.

        Implementations own pattern compilation (honouring
        ``options.case_insensitive``), file scanning, the match decision
        (honouring ``options.inverse``) and output rendering (per
        ``options.output``).  The file operand ``"-"`` means standard
        input.

        Raises
        ------
        SearchEngineError
            When the engine cannot process the request.
        """
        ...  # pragma: no cover
