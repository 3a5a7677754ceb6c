"""File names for extracted documents.

The naming scheme matches the artifacts produced by earlier releases, so
downstream scripts can keep globbing for ``*-api-doc.json``. Names never
contain a path separator, so a default file always lands directly in the
output directory.
"""

from __future__ import annotations

_SUFFIX = "-api-doc.json"


def _flatten(part: str) -> str:
    return part.replace("/", "_").replace("\\", "_")


def tag_filename(tag: str) -> str:
    """Return ``{tag}-api-doc.json``, with ``/`` and ``\\`` in *tag* turned into ``_``."""
    return f"{_flatten(tag)}{_SUFFIX}"


def endpoint_filename(path: str, method: str) -> str:
    """Return the file name for a single-operation extraction.

    Every ``/`` in *path* becomes ``_``, so ``/pets/{id}`` + ``get`` gives
    ``_pets_{id}-get-api-doc.json``.
    """
    return f"{_flatten(path)}-{method}{_SUFFIX}"
