"""List the tags and operations a document offers for slicing."""

from __future__ import annotations

from typing import Any, Mapping, Union

from specslice.models import Endpoint, HTTPMethod
from specslice.slicer.document import SourceDocument, operation_tags

_DocumentLike = Union[SourceDocument, Mapping[str, Any]]


def _wrap(document: _DocumentLike) -> SourceDocument:
    if isinstance(document, SourceDocument):
        return document
    return SourceDocument.from_raw(document)


def list_tags(document: _DocumentLike) -> list[str]:
    """Return the tag names a caller can slice by.

    When the document declares a top-level ``tags`` array its names are
    returned in declaration order. Otherwise the tags are gathered from the
    operations themselves in first-seen order, with untagged operations
    contributing ``"default"``.
    """
    source = _wrap(document)

    declared = [t["name"] for t in source.tags if isinstance(t.get("name"), str)]
    if declared:
        return declared

    seen: dict[str, None] = {}
    for _, _, operation in source.operations():
        for tag in operation_tags(operation):
            seen.setdefault(tag, None)
    return list(seen)


def endpoints_by_tag(document: _DocumentLike) -> dict[str, list[Endpoint]]:
    """Group every operation under each tag it carries.

    An operation with several tags is listed under each of them; an
    operation without a ``tags`` field is listed under ``"default"``.
    Keys are sorted; endpoints keep document order within a tag.
    """
    source = _wrap(document)
    groups: dict[str, list[Endpoint]] = {}

    for path, method, operation in source.operations():
        tags = operation_tags(operation)
        summary = operation.get("summary")
        operation_id = operation.get("operationId")
        endpoint = Endpoint(
            path=path,
            method=HTTPMethod(method),
            operation_id=operation_id if isinstance(operation_id, str) else None,
            summary=summary if isinstance(summary, str) else None,
            tags=tags,
            deprecated=operation.get("deprecated") is True,
        )
        for tag in tags:
            groups.setdefault(tag, []).append(endpoint)

    return {tag: groups[tag] for tag in sorted(groups)}


def tag_description(document: _DocumentLike, tag: str) -> str:
    """Return the description of the declared tag named *tag*, or ``""``."""
    for tag_obj in _wrap(document).tags:
        if tag_obj.get("name") == tag:
            description = tag_obj.get("description")
            return description if isinstance(description, str) else ""
    return ""
