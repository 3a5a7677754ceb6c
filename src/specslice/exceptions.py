"""Exception hierarchy for specslice.

All exceptions inherit from :class:`SpecsliceError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specslice.exit_codes`.
The top-level error handler in :func:`specslice.app.main` catches
``SpecsliceError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

The slicing core itself never raises for irregular document shapes; only
:class:`InvalidSelectionError` can escape from
:func:`~specslice.slicer.extract.extract`.

Subclass hierarchy::

    SpecsliceError (exit 1)
    +-- InvalidUsageError       (exit 2)
    |   +-- InvalidSelectionError (exit 2)
    +-- SpecParseError          (exit 7)
    +-- ConfigError             (exit 1)
    +-- OutputWriteError        (exit 1)
"""

from specslice.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class SpecsliceError(Exception):
    """Base exception for all specslice errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specslice.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SpecsliceError):
    """Raised for invalid CLI arguments or conflicting options."""

    exit_code = EXIT_INVALID_USAGE


class InvalidSelectionError(InvalidUsageError):
    """Raised for a selection that can never match (empty tag, unknown method token)."""


class SpecParseError(SpecsliceError):
    """Raised when the API description cannot be loaded or parsed into a mapping."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(SpecsliceError):
    """Raised for configuration problems (invalid JSON, bad values in config files)."""

    exit_code = EXIT_GENERIC_FAILURE


class OutputWriteError(SpecsliceError):
    """Raised when an extracted document cannot be written to disk."""

    exit_code = EXIT_GENERIC_FAILURE
