"""CLI command handlers."""

import sys

from pickpanel.utils.config import Config, get_pickpanel_dir
from pickpanel.utils.debug import reload_config
from pickpanel.utils.exceptions import ConfigurationError


def cmd_pick(args):
    """Show a selection overlay and print the chosen option."""
    from pickpanel.cli.ui import run_overlay
    from pickpanel.core import SelectionOverlay

    overlay = SelectionOverlay(args.title, args.options)
    choice = run_overlay(overlay, border_style=args.border_style)

    if choice is None:
        sys.exit(1)
    print(choice)


def cmd_status(args):
    """Show current settings."""
    pickpanel_dir = get_pickpanel_dir()
    config = Config(pickpanel_dir)

    print(f"Debug: {'on' if config.debug else 'off'}")
    print(f"Border: {config.border_style}")
    print(f"Config: {pickpanel_dir}")


def cmd_debug_on(args):
    """Enable debug logging."""
    config = Config(get_pickpanel_dir())
    config.set_debug(True)
    reload_config()
    print("Debug mode enabled")


def cmd_debug_off(args):
    """Disable debug logging."""
    config = Config(get_pickpanel_dir())
    config.set_debug(False)
    reload_config()
    print("Debug mode disabled")


def cmd_env_list(args):
    """List all env var overrides."""
    config = Config(get_pickpanel_dir())
    env_vars = config.list_env()

    if not env_vars:
        print("No env var overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        print(f"{key}={value}")


def cmd_env_set(args):
    """Set an env var override."""
    config = Config(get_pickpanel_dir())
    try:
        config.set_env(args.key, args.value)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    reload_config()
    print(f"Set {args.key}={args.value}")


def cmd_env_unset(args):
    """Unset an env var override."""
    config = Config(get_pickpanel_dir())
    if config.unset_env(args.key):
        reload_config()
        print(f"Unset {args.key}")
    else:
        print(f"{args.key} not found")
