"""Constants used throughout pickpanel."""

# Default border color for the selection panel
DEFAULT_BORDER_STYLE = "cyan"

# Row markers (two characters each)
SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "

# Key binding legend shown at the bottom of the panel
HINT_TEXT = "↑↓/jk: navigate • enter: select • q: cancel"


# Rich styles for panel content
class Styles:
    """Style constants for rendered overlays."""

    TITLE = "bold"
    OPTION = ""
    SELECTED = "reverse bold"
    HINT = "dim"
