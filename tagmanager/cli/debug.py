import click

from .utils.logging import configure_logging


def add_debug_option(cmd: click.Command) -> click.Command:
    """Attach a --debug/--no-debug flag to a command or group."""
    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                default=None,
                is_eager=True,
                expose_value=False,
                callback=_set_debug,
                help="Enable debug mode",
            ),
        )
    return cmd


def _set_debug(ctx: click.Context, param, value):
    """
    Store the debug flag on the root context and configure logging.

    An unset flag on a subcommand keeps whatever the group decided.
    """
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    if value is not None:
        root_ctx.obj["DEBUG"] = value
    debug = root_ctx.obj.setdefault("DEBUG", False)
    configure_logging(debug)
    return debug
