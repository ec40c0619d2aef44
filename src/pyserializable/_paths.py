"""Access-path rendering for diagnostics."""

from __future__ import annotations

import json
import re

PLAIN_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def key_path(path: str, key: object) -> str:
    """Extend ``path`` with a dict key.

    Bare identifiers use dotted access (``.foo``); anything else is
    bracket-quoted (``["foo bar"]``).
    """
    if isinstance(key, str):
        if PLAIN_IDENTIFIER_RE.fullmatch(key):
            return f"{path}.{key}"
        return f"{path}[{json.dumps(key, ensure_ascii=False)}]"
    return f"{path}[{key!r}]"


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"
