"""Config commands -- view and modify global configuration.

Provides the ``specslice config`` sub-command group for reading, updating,
and resetting the user's :class:`~specslice.models.GlobalConfig`.
"""

from __future__ import annotations

import typer

from specslice.output import error, get_output, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration.

    Includes project config and ``SPECSLICE_*`` environment overrides.

    Example::

        specslice config show --json
    """
    from specslice.commands.common import fail
    from specslice.config import get_config_dir, resolve_config
    from specslice.exceptions import ConfigError
    from specslice.serialize import dump_document

    try:
        config = resolve_config()
    except ConfigError as exc:
        fail(exc)
    info(f"Config directory: {get_config_dir()}")
    get_output().print_document(dump_document(config.model_dump(mode="json")))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'output.indent')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a value in the global configuration.

    The value is coerced to the type of the existing field (bool, int, or
    str) and the result is validated before it is saved.

    Example::

        specslice config set output.indent 4
        specslice config set output.directory ./api-docs
    """
    from specslice.config import load_global_config, save_global_config
    from specslice.models import GlobalConfig

    data = load_global_config().model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target:
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    current = target[final_key]
    if isinstance(current, bool):
        coerced: object = value.lower() in ("true", "1", "yes")
    elif isinstance(current, int):
        try:
            coerced = int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    else:
        coerced = value

    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValueError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset the global configuration to defaults."""
    from specslice.config import save_global_config
    from specslice.models import GlobalConfig

    if not force and not typer.confirm("Reset configuration to defaults?"):
        info("Aborted.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
