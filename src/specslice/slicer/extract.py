"""Slice a parsed API description down to one tag or one operation.

:func:`extract` is the single public entry point. Given the full document
and a :data:`~specslice.models.Selection` it returns a brand-new document
that:

* keeps the source's version marker, ``info`` (shallow copy) and
  dialect-appropriate transport metadata (``host``/``basePath``/
  ``schemes``/``consumes``/``produces`` for Swagger 2.0, ``servers`` for
  OpenAPI 3.x);
* lists only the matching operations under ``paths``, alongside the
  path item's non-operation keys (shared ``parameters``, ``x-*``
  extensions) so that each retained path item stays complete;
* carries exactly the named schemas transitively reachable from those
  operations, under ``definitions`` or ``components.schemas`` depending
  on the source dialect, never both.

Nothing in the source is mutated; every retained subtree is deep-copied.
A selection that matches nothing is not an error: the result simply has
empty ``paths``, ``tags`` and schema pool.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping, Union

from specslice.exceptions import InvalidSelectionError
from specslice.models import Dialect, OperationSelection, Selection, TagSelection
from specslice.slicer.document import (
    HTTP_METHODS,
    SourceDocument,
    as_dict,
    operation_tags,
)
from specslice.slicer.refs import (
    collect_operation_refs,
    collect_parameter_refs,
    expand_closure,
)

_VERSION_FIELDS = ("swagger", "openapi")

_TRANSPORT_FIELDS: dict[Dialect, tuple[str, ...]] = {
    Dialect.SWAGGER_V2: ("host", "basePath", "schemes", "consumes", "produces"),
    Dialect.OPENAPI_V3: ("servers",),
}


def extract(
    document: Union[SourceDocument, Mapping[str, Any]],
    selection: Selection,
) -> dict[str, Any]:
    """Return the self-contained subset of *document* described by *selection*.

    Args:
        document: The parsed source document, either raw or already wrapped
            in a :class:`~specslice.slicer.document.SourceDocument`.
        selection: A :class:`~specslice.models.TagSelection` or an
            :class:`~specslice.models.OperationSelection`.

    Returns:
        A new document tree ready for JSON serialisation.

    Raises:
        InvalidSelectionError: If *selection* can never match anything:
            an empty tag or path, or a method that is not one of the
            seven lowercase HTTP method tokens.

    Example::

        raw = load_spec("petstore.yaml")
        sliced = extract(raw, TagSelection(tag="pets"))
        sliced = extract(raw, OperationSelection(path="/pets", method="get", tag="pets"))
    """
    _validate_selection(selection)
    source = document if isinstance(document, SourceDocument) else SourceDocument.from_raw(document)

    paths = _select_paths(source, selection)

    seeds: set[str] = set()
    for path_item in paths.values():
        seeds |= collect_parameter_refs(path_item.get("parameters"))
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                seeds |= collect_operation_refs(operation, source.dialect)

    pool = expand_closure(seeds, source.schema_pool)
    return _assemble(source, selection, paths, pool)


def _validate_selection(selection: Selection) -> None:
    """Reject selections that cannot resolve against any document."""
    if isinstance(selection, TagSelection):
        if not selection.tag:
            raise InvalidSelectionError("Tag name must not be empty")
        return

    if isinstance(selection, OperationSelection):
        if not selection.path:
            raise InvalidSelectionError("Operation path must not be empty")
        if selection.method not in HTTP_METHODS:
            raise InvalidSelectionError(
                f"Unknown HTTP method '{selection.method}'. "
                f"Expected one of: {', '.join(HTTP_METHODS)}"
            )
        return

    raise InvalidSelectionError(f"Unsupported selection: {selection!r}")


def _matches(selection: Selection, path: str, method: str, operation: dict[str, Any]) -> bool:
    if isinstance(selection, TagSelection):
        return selection.tag in operation_tags(operation)
    return path == selection.path and method == selection.method


def _select_paths(source: SourceDocument, selection: Selection) -> dict[str, Any]:
    """Build the output ``paths`` tree.

    A path appears only when at least one of its operations matched. Its
    non-operation keys are kept; operations that did not match are dropped.
    """
    matched: dict[str, set[str]] = {}
    for path, method, operation in source.operations():
        if _matches(selection, path, method, operation):
            matched.setdefault(path, set()).add(method)

    paths: dict[str, Any] = {}
    for path, methods in matched.items():
        path_item = as_dict(source.paths.get(path))
        paths[path] = {
            key: copy.deepcopy(value)
            for key, value in path_item.items()
            if key not in HTTP_METHODS or key in methods
        }
    return paths


def _assemble(
    source: SourceDocument,
    selection: Selection,
    paths: dict[str, Any],
    pool: dict[str, Any],
) -> dict[str, Any]:
    """Put the sliced document together in canonical key order."""
    raw = source.raw
    result: dict[str, Any] = {}

    for key in _VERSION_FIELDS:
        if key in raw:
            result[key] = raw[key]

    if "info" in raw:
        info = raw["info"]
        result["info"] = dict(info) if isinstance(info, dict) else copy.deepcopy(info)

    for key in _TRANSPORT_FIELDS[source.dialect]:
        if key in raw:
            result[key] = copy.deepcopy(raw[key])

    label = selection.tag
    result["tags"] = [
        copy.deepcopy(tag) for tag in source.tags if label and tag.get("name") == label
    ]
    result["paths"] = paths

    if source.dialect is Dialect.SWAGGER_V2:
        result["definitions"] = pool
    else:
        result["components"] = {"schemas": pool}

    return result
