"""Allow running as python -m pickpanel.cli."""

from pickpanel.cli import cli_main

cli_main()
