"""Document slicer -- cut an API description down to one tag or one operation.

This sub-package is the core of specslice. It works on an already parsed
document (plain dicts and lists) and performs no I/O.

Typical usage::

    from specslice.models import TagSelection
    from specslice.slicer import SourceDocument, extract

    source = SourceDocument.from_raw(raw)
    sliced = extract(source, TagSelection(tag="pets"))

Sub-modules:

* :mod:`~specslice.slicer.document` -- Dialect detection and tolerant
  accessors over the untyped document tree.
* :mod:`~specslice.slicer.refs` -- ``$ref`` collection and the transitive
  closure over the schema pool.
* :mod:`~specslice.slicer.extract` -- Operation matching and assembly of
  the sliced document.
* :mod:`~specslice.slicer.catalog` -- Tag and endpoint listings.
"""

from specslice.slicer.catalog import endpoints_by_tag, list_tags, tag_description
from specslice.slicer.document import SourceDocument, detect_dialect
from specslice.slicer.extract import extract
from specslice.slicer.refs import collect_refs, expand_closure

__all__ = [
    "SourceDocument",
    "collect_refs",
    "detect_dialect",
    "endpoints_by_tag",
    "expand_closure",
    "extract",
    "list_tags",
    "tag_description",
]
