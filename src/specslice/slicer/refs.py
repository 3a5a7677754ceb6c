"""Collect the named schemas a schema subtree refers to.

Only **local** references (``#/...``) count; the referenced name is the
pointer's final segment after RFC 6901 unescaping, so both
``#/definitions/Pet`` and ``#/components/schemas/Pet`` name ``Pet``.

:func:`collect_refs` walks the *shape* of one schema and never follows a
reference into its target, so it terminates on any finite tree.
Following targets is :func:`expand_closure`'s job, which keeps a visited
set and expands each name at most once, so reference cycles are safe.
"""

from __future__ import annotations

import copy
from typing import Any, Iterable, Mapping, Optional

from specslice.models import Dialect
from specslice.slicer.document import as_dict, as_list

_COMPOSITION_KEYS = ("allOf", "anyOf", "oneOf")


def ref_name(pointer: Any) -> Optional[str]:
    """Return the schema name a local ``$ref`` pointer ends in.

    Args:
        pointer: The ``$ref`` value, e.g. ``"#/definitions/Pet"``.

    Returns:
        The unescaped final segment, or ``None`` for non-strings, external
        references, and pointers with an empty final segment.
    """
    if not isinstance(pointer, str) or not pointer.startswith("#/"):
        return None
    name = pointer.rsplit("/", 1)[-1]
    name = name.replace("~1", "/").replace("~0", "~")
    return name or None


def collect_refs(schema: Any) -> set[str]:
    """Return every schema name referenced anywhere inside *schema*.

    Descends through ``items``, every value of ``properties``, every member
    of ``allOf`` / ``anyOf`` / ``oneOf``, and ``additionalProperties`` when
    it is a schema object rather than a boolean. A node carrying ``$ref``
    contributes its name and nothing else; sibling keys are ignored.

    Missing or malformed substructure simply contributes no names.

    Example::

        collect_refs({"type": "array", "items": {"$ref": "#/definitions/Pet"}})
        # {"Pet"}
    """
    if not isinstance(schema, dict):
        return set()

    if "$ref" in schema:
        name = ref_name(schema["$ref"])
        return {name} if name else set()

    names = collect_refs(schema.get("items"))
    for prop in as_dict(schema.get("properties")).values():
        names |= collect_refs(prop)
    for key in _COMPOSITION_KEYS:
        for member in as_list(schema.get(key)):
            names |= collect_refs(member)
    # A boolean additionalProperties is not a dict and yields nothing.
    names |= collect_refs(schema.get("additionalProperties"))
    return names


def _collect_content_refs(content: Any) -> set[str]:
    """Collect refs from every ``<media-type>.schema`` in an OpenAPI 3 content map."""
    names: set[str] = set()
    for media_type in as_dict(content).values():
        names |= collect_refs(as_dict(media_type).get("schema"))
    return names


def collect_parameter_refs(parameters: Any) -> set[str]:
    """Collect refs from the ``schema`` of each entry in a parameter list."""
    names: set[str] = set()
    for param in as_list(parameters):
        names |= collect_refs(as_dict(param).get("schema"))
    return names


def collect_operation_refs(operation: Mapping[str, Any], dialect: Dialect) -> set[str]:
    """Return the names directly referenced by one operation.

    Scans the operation's ``parameters`` in both dialects. Request bodies
    and response ``content`` maps are only read for OpenAPI 3; bare response
    ``schema`` fields are only read for Swagger 2.0.

    Args:
        operation: The operation object.
        dialect: The dialect of the document the operation belongs to.

    Returns:
        The set of directly referenced schema names (not yet expanded).
    """
    names = collect_parameter_refs(operation.get("parameters"))

    if dialect is Dialect.OPENAPI_V3:
        names |= _collect_content_refs(as_dict(operation.get("requestBody")).get("content"))

    for response in as_dict(operation.get("responses")).values():
        response = as_dict(response)
        if dialect is Dialect.SWAGGER_V2:
            names |= collect_refs(response.get("schema"))
        else:
            names |= _collect_content_refs(response.get("content"))

    return names


def expand_closure(seeds: Iterable[str], pool: Mapping[str, Any]) -> dict[str, Any]:
    """Expand *seeds* to the full set of schemas they transitively need.

    Runs a worklist to a fixed point: each name is looked up in *pool* at
    most once, and the definition found is scanned with
    :func:`collect_refs` for further names. Names absent from *pool*
    (dangling references) are dropped.

    Args:
        seeds: Names referenced directly by the selected operations.
        pool: The source document's named schemas.

    Returns:
        A new mapping holding deep copies of every reachable definition,
        in the order the source *pool* declares them.
    """
    worklist = list(seeds)
    visited: set[str] = set()
    resolved: set[str] = set()

    while worklist:
        name = worklist.pop()
        if name in visited:
            continue
        visited.add(name)
        if name not in pool:
            continue
        resolved.add(name)
        worklist.extend(collect_refs(pool[name]) - visited)

    return {name: copy.deepcopy(schema) for name, schema in pool.items() if name in resolved}
