"""CLI entry point for pickpanel.

Uses Typer for command routing with lazy loading for performance.
Non-interactive commands do not import the terminal UI.
"""

from typing import Optional

import typer

__all__ = ["app", "cli_main"]

app = typer.Typer(
    name="pickpanel",
    help="Modal single-choice selection overlay for the terminal",
    no_args_is_help=True,
)


@app.command()
def pick(
    title: str,
    options: Optional[list[str]] = typer.Argument(None, help="Options to choose from"),
    border_style: Optional[str] = typer.Option(
        None, "--border-style", help="Rich style for the panel border"
    ),
) -> None:
    """Pick one option; prints it on stdout, exits 1 on cancel."""
    from pickpanel.cli.commands import cmd_pick

    class Args:
        def __init__(self):
            self.title = title
            self.options = options or []
            self.border_style = border_style

    cmd_pick(Args())


@app.command()
def status() -> None:
    """Show current settings."""
    from pickpanel.cli.commands import cmd_status

    cmd_status(None)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from pickpanel.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from pickpanel.cli.commands import cmd_debug_off

    cmd_debug_off(None)


# Env subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from pickpanel.cli.commands import cmd_env_list

    cmd_env_list(None)


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override."""
    from pickpanel.cli.commands import cmd_env_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_env_set(Args())


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from pickpanel.cli.commands import cmd_env_unset

    class Args:
        def __init__(self):
            self.key = key

    cmd_env_unset(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
