"""specslice -- Cut Swagger 2.0 / OpenAPI 3.x documents down to one tag or endpoint.

The extracted document is self-contained: it keeps the source's metadata,
only the selected operations, and exactly the schema definitions those
operations transitively reference.

Typical workflow::

    specslice tags petstore.yaml                  # see what can be sliced
    specslice tag petstore.yaml pets              # -> pets-api-doc.json
    specslice endpoint petstore.yaml /pets get    # -> _pets-get-api-doc.json

Modules:
    app: Typer application and CLI entry point.
    slicer: The slicing core (pure functions over parsed documents).
    parser: Loading documents from files, URLs, and stdin.
    models: Pydantic models shared across the package.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"
