"""Extraction commands -- write a sliced document for one tag or one endpoint.

By default the result is written to ``{tag}-api-doc.json`` (or
``{path}-{method}-api-doc.json``) in the configured output directory;
``--output`` picks an explicit file and ``--stdout`` prints instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

from specslice.commands.common import fail, load_source
from specslice.exceptions import InvalidUsageError, OutputWriteError, SpecsliceError
from specslice.models import GlobalConfig, OperationSelection, Selection, TagSelection
from specslice.naming import endpoint_filename, tag_filename
from specslice.output import debug, get_output, success, suggest, warning
from specslice.slicer.document import SourceDocument, as_dict, operation_tags
from specslice.slicer.extract import extract


def _schema_count(sliced: dict[str, Any]) -> int:
    if "definitions" in sliced:
        return len(sliced["definitions"])
    return len(as_dict(sliced.get("components")).get("schemas", {}))


def _run(
    source: SourceDocument,
    selection: Selection,
    filename: str,
    output_file: Optional[str],
    output_dir: Optional[str],
    indent: Optional[int],
    to_stdout: bool,
) -> dict[str, Any]:
    """Slice *source* and deliver the result; returns the sliced document."""
    from specslice.config import resolve_config
    from specslice.serialize import dump_document, write_document

    try:
        if output_file is not None and to_stdout:
            raise InvalidUsageError("--output and --stdout cannot be combined")
        config: GlobalConfig = resolve_config(cli_output_dir=output_dir, cli_indent=indent)
        sliced = extract(source, selection)
    except SpecsliceError as exc:
        fail(exc)

    debug(
        f"Retained {len(sliced['paths'])} path(s) and "
        f"{_schema_count(sliced)} schema(s)"
    )
    if not sliced["paths"]:
        warning("No operations matched the selection; the document has no paths.")

    settings = config.output
    if to_stdout:
        get_output().print_document(
            dump_document(sliced, indent=settings.indent, ensure_ascii=settings.ensure_ascii)
        )
        return sliced

    if output_file is not None:
        target = Path(output_file)
    else:
        target = Path(settings.directory or ".") / filename

    try:
        write_document(sliced, target, indent=settings.indent, ensure_ascii=settings.ensure_ascii)
    except OSError as exc:
        fail(OutputWriteError(f"Cannot write {target}: {exc.strerror or exc}"))
    success(f"Wrote {target}")
    return sliced


def extract_tag_command(
    spec: str = typer.Argument(help="Path, URL, or '-' for stdin."),
    tag: str = typer.Argument(help="Tag whose operations to extract."),
    output_file: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of the default name."
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Directory for the default file name."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", min=0, help="JSON indentation width."
    ),
    to_stdout: bool = typer.Option(
        False, "--stdout", help="Print the document instead of writing a file."
    ),
) -> None:
    """Extract every operation carrying TAG, plus the schemas they need.

    Operations without tags belong to the ``default`` tag.

    Example::

        specslice tag petstore.yaml pets
        specslice tag petstore.yaml pets --stdout | jq .definitions
    """
    source = load_source(spec)
    sliced = _run(
        source,
        TagSelection(tag=tag),
        tag_filename(tag),
        output_file,
        output_dir,
        indent,
        to_stdout,
    )
    if not sliced["paths"]:
        suggest(f"Run: specslice tags {spec}")


def extract_endpoint_command(
    spec: str = typer.Argument(help="Path, URL, or '-' for stdin."),
    path: str = typer.Argument(help="Path template, e.g. '/pets/{petId}'."),
    method: str = typer.Argument(help="HTTP method, e.g. get."),
    tag: Optional[str] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Tag to keep in the output 'tags' list (default: the operation's first tag).",
    ),
    output_file: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of the default name."
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Directory for the default file name."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", min=0, help="JSON indentation width."
    ),
    to_stdout: bool = typer.Option(
        False, "--stdout", help="Print the document instead of writing a file."
    ),
) -> None:
    """Extract a single operation, plus the schemas it needs.

    Example::

        specslice endpoint petstore.yaml /pets/{petId} get
        specslice endpoint petstore.yaml /pets post --tag pets -o create-pet.json
    """
    source = load_source(spec)
    method = method.lower()

    if tag is None:
        operation = as_dict(as_dict(source.paths.get(path)).get(method))
        operation_tag_names = operation_tags(operation) if operation else []
        if operation_tag_names:
            tag = operation_tag_names[0]

    sliced = _run(
        source,
        OperationSelection(path=path, method=method, tag=tag),
        endpoint_filename(path, method),
        output_file,
        output_dir,
        indent,
        to_stdout,
    )
    if not sliced["paths"]:
        suggest(f"Run: specslice endpoints {spec}")
