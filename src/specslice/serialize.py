"""Serialise sliced documents to pretty-printed JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from specslice.config import atomic_write


def dump_document(document: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Render *document* as JSON text ending in a newline.

    Args:
        document: The sliced document tree.
        indent: Indentation width. ``2`` matches previously published artifacts.
        ensure_ascii: Escape non-ASCII characters when ``True``.
    """
    return json.dumps(document, indent=indent, ensure_ascii=ensure_ascii, default=str) + "\n"


def write_document(
    document: Any,
    path: Path,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> Path:
    """Atomically write *document* as JSON to *path* and return the path."""
    atomic_write(path, dump_document(document, indent=indent, ensure_ascii=ensure_ascii))
    return path
