"""Built-in CLI commands for specslice.

* :mod:`~specslice.commands.inspect` -- ``tags`` and ``endpoints`` listings.
* :mod:`~specslice.commands.extract` -- ``tag`` and ``endpoint`` extraction.
* :mod:`~specslice.commands.config` -- ``config show|set|reset``.
"""
