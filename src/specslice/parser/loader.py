"""Load Swagger 2.0 / OpenAPI 3.x documents from a URL, local file, or stdin.

Both JSON and YAML are accepted, with format detection from the file
extension or ``Content-Type`` header and a content-based fallback. Anything
that does not parse to a mapping is rejected with
:class:`~specslice.exceptions.SpecParseError`.

* :func:`load_spec` -- Load and parse a document from any supported source.
* :func:`detect_version` -- Return the ``swagger`` / ``openapi`` marker,
  rejecting documents that carry neither or an unsupported major version.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from specslice.exceptions import SpecParseError


def load_spec(source: str) -> dict[str, Any]:
    """Load an API description from URL, file path, or stdin (``-``).

    Args:
        source: A URL (http/https), file path, or ``-`` for stdin.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SpecParseError: If the source cannot be read or parsed.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")

    return _parse_content(content)


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch a document over HTTP(S), using ``Content-Type`` as a format hint."""
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> dict[str, Any]:
    """Load a document from disk; ``.json``/``.yaml``/``.yml`` set the format hint."""
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read spec file {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Spec file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return _parse_content(content, hint=hint)


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    JSON is tried first unless *hint* is ``"yaml"``; every JSON document is
    also YAML, but the JSON parser is stricter and faster.

    Raises:
        SpecParseError: If the content is neither, or is not a mapping.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        return _require_mapping(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        msg = "Failed to parse spec as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Spec must be a JSON/YAML object (got {kind})")
    return result


def detect_version(spec: dict[str, Any]) -> str:
    """Return the document's version marker.

    Accepts ``swagger: "2.x"`` and ``openapi: "3.x"``.

    Raises:
        SpecParseError: If neither marker is present or the major version is
            not supported.
    """
    if "swagger" in spec:
        version = str(spec["swagger"])
        if not version.startswith("2"):
            raise SpecParseError(f"Unsupported Swagger version: {version}")
        return version

    if "openapi" in spec:
        version = str(spec["openapi"])
        if not version.startswith("3."):
            raise SpecParseError(f"Unsupported OpenAPI version: {version}")
        return version

    raise SpecParseError(
        "Missing 'swagger' or 'openapi' field. Is this a Swagger/OpenAPI document?"
    )
