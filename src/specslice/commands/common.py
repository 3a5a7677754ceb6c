"""Helpers shared by the command modules."""

from __future__ import annotations

from typing import NoReturn

import typer

from specslice.exceptions import SpecsliceError
from specslice.output import debug, error
from specslice.slicer.document import SourceDocument


def load_source(spec: str) -> SourceDocument:
    """Load *spec* and wrap it as a :class:`SourceDocument`.

    Raises:
        typer.Exit: With the error's exit code when the document cannot be
            loaded or carries no supported version marker.
    """
    from specslice.parser import detect_version, load_spec

    try:
        raw = load_spec(spec)
        version = detect_version(raw)
    except SpecsliceError as exc:
        fail(exc)

    source = SourceDocument.from_raw(raw)
    debug(f"Loaded {spec} (version {version}, dialect {source.dialect.value})")
    return source


def fail(exc: SpecsliceError) -> NoReturn:
    """Report *exc* on stderr and exit with its exit code."""
    error(str(exc))
    raise typer.Exit(code=exc.exit_code)
