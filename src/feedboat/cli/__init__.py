"""CLI entry point for feedboat.

Uses Typer for command routing with lazy loading, so configuration
commands don't pay for importing the dashboard.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="feedboat",
    help="Terminal feed-reader dashboard",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the dashboard if no command given."""
    if ctx.invoked_subcommand is None:
        from feedboat.cli.commands import cmd_dashboard

        cmd_dashboard(None)


@app.command()
def status() -> None:
    """Show current status."""
    from feedboat.cli.commands import cmd_status

    cmd_status(None)


@app.command()
def keys() -> None:
    """Show key bindings."""
    from feedboat.cli.commands import cmd_keys

    cmd_keys(None)


# Config subcommand group
config_app = typer.Typer(help="Show or change settings")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show() -> None:
    """Show configuration values."""
    from feedboat.cli.commands import cmd_config_show

    cmd_config_show(None)


@config_app.command("set")
def config_set(key: str, value: str) -> None:
    """Set a configuration value (debug, cycle_next_key, cycle_previous_key)."""
    from feedboat.cli.commands import cmd_config_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_config_set(Args())


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from feedboat.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from feedboat.cli.commands import cmd_debug_off

    cmd_debug_off(None)


# Env subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from feedboat.cli.commands import cmd_env_list

    cmd_env_list(None)


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override."""
    from feedboat.cli.commands import cmd_env_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_env_set(Args())


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from feedboat.cli.commands import cmd_env_unset

    class Args:
        def __init__(self):
            self.key = key

    cmd_env_unset(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
