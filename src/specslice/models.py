"""Canonical Pydantic models shared across all specslice modules.

The models fall into three groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`OutputConfig` and :class:`GlobalConfig`.

**Document vocabulary** -- enumerations describing the two supported
dialects and the HTTP method tokens recognised on a path item:
    :class:`Dialect` and :class:`HTTPMethod`.

**Selections and catalog rows** -- what the caller asks the slicer for, and
what the catalog reports back:
    :class:`TagSelection`, :class:`OperationSelection`, :class:`Endpoint`.

The API description itself is deliberately *not* modelled: it stays a plain
tree of dicts, lists, and scalars so that unknown fields survive slicing
untouched.
"""

from __future__ import annotations

import enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Config ---


class OutputConfig(BaseModel):
    """How sliced documents are serialised and where they are written."""

    indent: int = Field(default=2, ge=0, description="JSON indentation width")
    ensure_ascii: bool = Field(
        default=False, description="Escape non-ASCII characters in JSON output"
    )
    directory: Optional[str] = Field(
        default=None,
        description="Directory for extracted files (default: current directory)",
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/specslice/config.json``.

    Loaded and saved by :func:`~specslice.config.load_global_config` and
    :func:`~specslice.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. See :func:`~specslice.config.resolve_config`.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Document vocabulary ---


class HTTPMethod(str, enum.Enum):
    """HTTP method tokens recognised as operations on a path item.

    Declaration order is the scan order used when walking a path item, so
    sliced documents list methods in a stable order.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"


class Dialect(str, enum.Enum):
    """The two document conventions a source may use.

    ``SWAGGER_V2`` keeps schemas under ``definitions``; ``OPENAPI_V3`` keeps
    them under ``components.schemas``.
    """

    SWAGGER_V2 = "swagger"
    OPENAPI_V3 = "openapi"


# --- Selections ---


class TagSelection(BaseModel):
    """Select every operation carrying ``tag``.

    Operations without a ``tags`` field belong to the implicit ``"default"``
    tag.
    """

    model_config = ConfigDict(frozen=True)

    tag: str


class OperationSelection(BaseModel):
    """Select the single operation at ``path`` + ``method``.

    ``tag`` only labels the extraction (it filters the output ``tags`` list);
    it plays no part in matching or in the schema closure.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    method: str
    tag: Optional[str] = None


Selection = Union[TagSelection, OperationSelection]


class Endpoint(BaseModel):
    """One operation as listed by :func:`~specslice.slicer.catalog.endpoints_by_tag`."""

    path: str
    method: HTTPMethod
    operation_id: Optional[str] = None
    summary: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    deprecated: bool = False
