"""Dialect detection and tolerant accessors over a parsed API description.

A parsed document is an untyped tree of dicts, lists, and scalars. Every
accessor in this module answers "nothing here" (an empty dict or list)
instead of raising when a field is missing or has the wrong type, so the
slicer can walk arbitrary input without defensive checks at each step.

:class:`SourceDocument` pins the :class:`~specslice.models.Dialect` once,
when it is built, so downstream code branches on the enum rather than
probing for ``definitions`` / ``components`` over and over.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from specslice.models import Dialect, HTTPMethod

HTTP_METHODS: tuple[str, ...] = tuple(m.value for m in HTTPMethod)

DEFAULT_TAG = "default"


def as_dict(value: Any) -> dict[str, Any]:
    """Return *value* if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """Return *value* if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def operation_tags(operation: Mapping[str, Any]) -> list[str]:
    """Return the tags of *operation*, or ``["default"]`` when it declares none.

    A missing or ``null`` ``tags`` field means "untagged"; an explicit empty
    list is respected as-is.
    """
    if operation.get("tags") is None:
        return [DEFAULT_TAG]
    return [t for t in as_list(operation.get("tags")) if isinstance(t, str)]


def detect_dialect(raw: Mapping[str, Any]) -> Dialect:
    """Decide which dialect *raw* is written in.

    The schema pool is the deciding signal: ``definitions`` means Swagger 2.0,
    ``components.schemas`` means OpenAPI 3.x. A document with neither falls
    back to its version marker, and to Swagger 2.0 when that is missing too.
    """
    if isinstance(raw.get("definitions"), dict):
        return Dialect.SWAGGER_V2
    if isinstance(as_dict(raw.get("components")).get("schemas"), dict):
        return Dialect.OPENAPI_V3
    if "openapi" in raw:
        return Dialect.OPENAPI_V3
    return Dialect.SWAGGER_V2


class SourceDocument:
    """A read-only view over a parsed API description.

    The wrapped mapping is never modified. Build one with
    :meth:`from_raw` and pass it to
    :func:`~specslice.slicer.extract.extract` or the catalog helpers.

    Args:
        raw: The parsed document tree.
        dialect: The dialect the document is written in.
    """

    def __init__(self, raw: Mapping[str, Any], dialect: Dialect) -> None:
        self.raw = raw
        self.dialect = dialect

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> SourceDocument:
        return cls(raw, detect_dialect(raw))

    @property
    def paths(self) -> dict[str, Any]:
        return as_dict(self.raw.get("paths"))

    @property
    def tags(self) -> list[dict[str, Any]]:
        """Declared tag objects, skipping entries that are not mappings."""
        return [t for t in as_list(self.raw.get("tags")) if isinstance(t, dict)]

    @property
    def schema_pool(self) -> dict[str, Any]:
        """The named schemas of this document's dialect."""
        if self.dialect is Dialect.SWAGGER_V2:
            return as_dict(self.raw.get("definitions"))
        return as_dict(as_dict(self.raw.get("components")).get("schemas"))

    def operations(self) -> Iterator[tuple[str, str, dict[str, Any]]]:
        """Yield ``(path, method, operation)`` for every recognised operation.

        Paths are visited in document order and methods in
        :class:`~specslice.models.HTTPMethod` order. Non-mapping path items
        and operations are skipped.
        """
        for path, path_item in self.paths.items():
            if not isinstance(path_item, dict):
                continue
            for method in HTTP_METHODS:
                operation = path_item.get(method)
                if isinstance(operation, dict):
                    yield path, method, operation
