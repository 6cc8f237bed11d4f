"""Utilities for pickpanel."""

from pickpanel.utils.config import Config, get_pickpanel_dir
from pickpanel.utils.exceptions import ConfigurationError, PickpanelError

__all__ = ["Config", "ConfigurationError", "PickpanelError", "get_pickpanel_dir"]
