"""Inspect commands -- see what a document offers before slicing it.

``specslice tags`` lists every tag with its endpoint count and description;
``specslice endpoints`` lists the operations, optionally for one tag. Both
read the document given on the command line and print a table (or JSON /
tab-separated rows with ``--json`` / ``--plain``).
"""

from __future__ import annotations

from typing import Optional

import typer

from specslice.commands.common import load_source
from specslice.output import get_output, info
from specslice.slicer.catalog import endpoints_by_tag, list_tags, tag_description


def tags_command(
    spec: str = typer.Argument(help="Path, URL, or '-' for stdin."),
) -> None:
    """List the tags available for extraction.

    Example::

        specslice tags petstore.yaml
    """
    source = load_source(spec)
    grouped = endpoints_by_tag(source)

    tag_names = list_tags(source)
    # Untagged operations show up under "default" even when tags are declared.
    for extra in grouped:
        if extra not in tag_names:
            tag_names.append(extra)

    if not tag_names:
        info("No tags found in this document.")
        return

    rows = [
        [name, str(len(grouped.get(name, []))), tag_description(source, name) or "-"]
        for name in tag_names
    ]
    get_output().print_table(
        ["Tag", "Endpoints", "Description"], rows, title=f"Tags ({len(rows)})"
    )


def endpoints_command(
    spec: str = typer.Argument(help="Path, URL, or '-' for stdin."),
    tag: Optional[str] = typer.Option(
        None, "--tag", "-t", help="Only list endpoints carrying this tag."
    ),
) -> None:
    """List operations grouped by tag.

    Example::

        specslice endpoints petstore.yaml
        specslice endpoints petstore.yaml --tag pets
    """
    source = load_source(spec)
    grouped = endpoints_by_tag(source)
    if tag is not None:
        grouped = {tag: grouped.get(tag, [])}

    rows: list[list[str]] = []
    for tag_name, endpoints in grouped.items():
        for endpoint in endpoints:
            rows.append([
                tag_name,
                endpoint.method.value.upper(),
                endpoint.path,
                endpoint.summary or "-",
                "Yes" if endpoint.deprecated else "",
            ])

    if not rows:
        info(f"No endpoints found for tag '{tag}'." if tag else "No endpoints found.")
        return

    get_output().print_table(
        ["Tag", "Method", "Path", "Summary", "Deprecated"],
        rows,
        title=f"Endpoints ({len(rows)})",
    )
