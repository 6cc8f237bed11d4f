"""Terminal helpers for drawing overlays in place."""

from rich.console import Console

# Overlays draw on stderr so stdout stays free for results
console = Console(stderr=True)


def _write(sequence: str) -> None:
    console.file.write(sequence)
    console.file.flush()


def clear_screen() -> None:
    """Clear terminal screen and hide cursor."""
    _write("\033[?25l")  # Hide cursor
    console.clear()


def reset_cursor() -> None:
    """Move cursor to home position without clearing.

    This allows overwriting content in place, avoiding flicker.
    Cursor should already be hidden by clear_screen().
    """
    # \033[H = move to home (row 1, col 1)
    _write("\033[H")


def show_cursor() -> None:
    """Show the cursor (call after the last frame)."""
    _write("\033[?25h")


def get_terminal_size() -> tuple[int, int]:
    """Get terminal width and height."""
    return console.size.width, console.size.height
