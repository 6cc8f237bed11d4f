"""Custom exceptions for pickpanel.

The overlay state machine never raises: empty lists, out-of-range indices
and missing callbacks are handled as edge cases. These exceptions cover the
surrounding tooling.

- PickpanelError: Base exception for all pickpanel errors
- ConfigurationError: Configuration related errors
"""


class PickpanelError(Exception):
    """Base exception for all pickpanel errors.

    All pickpanel-specific exceptions inherit from this class, allowing
    callers to catch all pickpanel errors with a single except clause.
    """

    pass


class ConfigurationError(PickpanelError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown setting names in env overrides
    """

    pass
