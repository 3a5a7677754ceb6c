"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specslice.exceptions.SpecsliceError` subclass.
Shell wrappers and CI jobs can inspect the exit code to tell a bad
selection apart from an unreadable document without parsing stderr.

Example::

    $ specslice tag openapi.yaml ""
    $ echo $?
    2   # EXIT_INVALID_USAGE -- the selection can never match
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or an unresolvable selection."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API description could not be loaded or parsed."""
