"""Input side of specslice -- turn a file, URL, or stdin into a document tree.

Typical usage::

    from specslice.parser import detect_version, load_spec

    raw = load_spec("https://petstore.swagger.io/v2/swagger.json")
    version = detect_version(raw)

The resulting dict is what :func:`~specslice.slicer.extract.extract`
consumes.
"""

from specslice.parser.loader import detect_version, load_spec

__all__ = ["load_spec", "detect_version"]
