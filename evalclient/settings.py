"""Environment-driven defaults for parsing and document output."""

from __future__ import annotations

import os
from typing import Optional

_FALSY = {"0", "false", "no", "off"}


def lenient_parsing() -> bool:
    """Whether unknown document fields are ignored (default) or rejected.

    Read on every call so tests and long-running clients can flip it through
    the environment without re-importing.
    """
    raw = os.getenv("EVALCLIENT_LENIENT_PARSING", "1")
    return raw.strip().lower() not in _FALSY


def json_indent() -> Optional[int]:
    """Indentation used by ``write_document``; ``None`` means compact output."""
    raw = os.getenv("EVALCLIENT_JSON_INDENT", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"EVALCLIENT_JSON_INDENT must be an integer, got {raw!r}") from None
    return value if value > 0 else None
