"""CLI command handlers."""

import sys

from feedboat.utils.config import Config, get_feedboat_dir
from feedboat.utils.exceptions import FeedboatError


def _fail(error: FeedboatError) -> None:
    """Report a feedboat error and exit with status 1."""
    from feedboat.cli.ui import console

    console.print(f"[red]Error:[/red] {error}")
    sys.exit(1)


def cmd_dashboard(args):
    """Launch the interactive dashboard."""
    from feedboat.cli.dashboard import run_dashboard

    try:
        run_dashboard(Config(get_feedboat_dir()))
    except FeedboatError as e:
        _fail(e)


def cmd_status(args):
    """Show current status."""
    from feedboat.cli.ui import console

    feedboat_dir = get_feedboat_dir()
    config = Config(feedboat_dir)

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{feedboat_dir}[/dim]")

    try:
        config.validate()
        console.print("[bold]Keys:[/bold] [green]ok[/green]")
    except FeedboatError as e:
        console.print(f"[bold]Keys:[/bold] [yellow]{e}[/yellow]")


def cmd_keys(args):
    """Print the key binding table."""
    from rich.table import Table

    from feedboat.cli.ui import console

    config = Config(get_feedboat_dir())
    nxt = config.cycle_next_key
    prev = config.cycle_previous_key

    table = Table(title="Key bindings", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Where")
    table.add_column("Action")
    rows = [
        ("Ctrl+C", "global", "Quit"),
        (f"Ctrl+{nxt.upper()}", "global", "Switch to next dialog (wraps)"),
        (f"Ctrl+{prev.upper()}", "global", "Switch to previous dialog (wraps)"),
        ("Up / k, Down / j", "lists", "Move selection"),
        ("Enter", "lists", "Open selected entry"),
        (":", "lists", "Command line (type 'quit' + Enter to quit)"),
        ("Up, Down, PgUp, PgDn", "article", "Scroll"),
        ("q", "any dialog", "Close dialog (quits on the last one)"),
    ]
    for row in rows:
        table.add_row(*row)
    console.print(table)


def cmd_config_show(args):
    """Show configuration values."""
    config = Config(get_feedboat_dir())
    for attr, desc, enabled in config.get_toggles():
        print(f"{attr} = {'on' if enabled else 'off'}  ({desc})")
    for attr, desc in Config.KEY_BINDINGS.items():
        print(f"{attr} = {getattr(config, attr)}  ({desc})")


def cmd_config_set(args):
    """Set a configuration value."""
    config = Config(get_feedboat_dir())
    try:
        config.set_value(args.key, args.value)
    except FeedboatError as e:
        _fail(e)
    print(f"Set {args.key}={args.value}")


def cmd_debug_on(args):
    """Enable debug logging."""
    config = Config(get_feedboat_dir())
    config.set_debug(True)
    print("Debug mode enabled")


def cmd_debug_off(args):
    """Disable debug logging."""
    config = Config(get_feedboat_dir())
    config.set_debug(False)
    print("Debug mode disabled")


def cmd_env_list(args):
    """List all env var overrides."""
    config = Config(get_feedboat_dir())
    env_vars = config.list_env()

    if not env_vars:
        print("No env var overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        print(f"{key}={value}")


def cmd_env_set(args):
    """Set an env var override."""
    config = Config(get_feedboat_dir())
    config.set_env(args.key, args.value)
    print(f"Set {args.key}={args.value}")


def cmd_env_unset(args):
    """Unset an env var override."""
    config = Config(get_feedboat_dir())
    if config.unset_env(args.key):
        print(f"Unset {args.key}")
    else:
        print(f"{args.key} was not set")
