"""Default search engine: hand the resolved request to another process.

grepkit ships no matcher of its own.  :class:`JsonHandoffEngine` writes
the :class:`~grepkit.core.models.SearchRequest` as a single JSON
document on stdout, for a downstream engine to read::

    grepkit -i foo a.txt b.txt | my-engine
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from grepkit.cli import exit_codes
from grepkit.core.models import SearchRequest

logger = logging.getLogger(__name__)


class JsonHandoffEngine:
    """Serialises each request as one line of JSON."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def search(self, request: SearchRequest) -> int:
        stream = self._stream if self._stream is not None else sys.stdout
        logger.debug("handing off request for pattern %r", request.pattern)
        stream.write(json.dumps(request.to_dict(), ensure_ascii=False))
        stream.write("\n")
        stream.flush()
        return exit_codes.SUCCESS
