"""Structured-document I/O for metric contracts.

Documents are JSON objects. Reading and writing go through caller-supplied
text streams; this module never opens files or sockets itself, and stream
errors (``OSError``) are not caught.
"""

from __future__ import annotations

import json
from typing import Any, Optional, TextIO

from evalclient import settings

_COMPACT = (",", ":")


def dumps_document(doc: Any, *, indent: Optional[int] = None) -> str:
    """Serialize a document. Compact separators unless ``indent`` is given."""
    if indent:
        return json.dumps(doc, indent=indent, ensure_ascii=False)
    return json.dumps(doc, separators=_COMPACT, ensure_ascii=False)


def loads_document(text: str | bytes) -> Any:
    return json.loads(text)


def write_document(doc: Any, sink: TextIO) -> None:
    """Write ``doc`` to ``sink`` using the configured indentation."""
    sink.write(dumps_document(doc, indent=settings.json_indent()))


def read_document(source: TextIO) -> Any:
    """Read one JSON document from ``source``."""
    return json.load(source)
