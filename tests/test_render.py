"""Tests for overlay rendering."""

from pickpanel.core import KeyEvent, SelectionOverlay, build_body, build_panel, render
from pickpanel.utils.constants import HINT_TEXT, Styles


def _lines(text: str) -> list[str]:
    return text.split("\n")


def test_panel_layout_order():
    overlay = SelectionOverlay("Pick a fruit", ["Apple", "Banana", "Cherry"])
    text = overlay.render()

    assert text.index("Pick a fruit") < text.index("Apple")
    assert text.index("Apple") < text.index("Banana") < text.index("Cherry")
    assert text.index("Cherry") < text.index(HINT_TEXT)


def test_rounded_border():
    lines = _lines(SelectionOverlay("T", ["a"]).render())

    assert lines[0].startswith("╭")
    assert lines[0].endswith("╮")
    assert lines[-1].startswith("╰")
    assert lines[-1].endswith("╯")
    assert all(line.startswith("│") for line in lines[1:-1])


def test_selected_marker_follows_cursor():
    overlay = SelectionOverlay("T", ["Apple", "Banana"])
    assert "> Apple" in overlay.render()
    assert "  Banana" in overlay.render()
    assert "> Banana" not in overlay.render()

    overlay.handle_key(KeyEvent.DOWN)

    assert "> Banana" in overlay.render()
    assert "> Apple" not in overlay.render()


def test_padding_inside_border():
    lines = _lines(SelectionOverlay("Title", ["a"]).render())

    # One blank padding row, then the title two cells in
    assert lines[1].strip("│ ") == ""
    assert lines[2].startswith("│  Title")


def test_selected_row_is_emphasized():
    overlay = SelectionOverlay("T", ["Apple", "Banana"])
    overlay.handle_key(KeyEvent.DOWN)
    body = build_body(overlay)

    emphasized = [
        body.plain[span.start : span.end]
        for span in body.spans
        if span.style == Styles.SELECTED
    ]
    assert emphasized == ["Banana"]


def test_color_output_uses_reverse_video():
    overlay = SelectionOverlay("T", ["Apple"])

    assert "\x1b[" not in overlay.render()
    assert "7m" in overlay.render(color=True)


def test_render_is_idempotent():
    overlay = SelectionOverlay("T", ["a", "b", "c"])
    overlay.handle_key(KeyEvent.DOWN)

    assert overlay.render() == overlay.render()
    assert overlay.render(color=True) == overlay.render(color=True)


def test_render_does_not_mutate():
    overlay = SelectionOverlay("T", ["a", "b"])
    overlay.handle_key(KeyEvent.DOWN)
    before = (overlay.selected_index, overlay.submitted, overlay.canceled)

    render(overlay)

    assert (overlay.selected_index, overlay.submitted, overlay.canceled) == before


def test_render_after_close():
    overlay = SelectionOverlay("T", ["a", "b"])
    overlay.handle_key(KeyEvent.CANCEL)

    assert "> a" in overlay.render()


def test_empty_options_render_title_and_hint():
    text = SelectionOverlay("Nothing here", []).render()

    assert "Nothing here" in text
    assert HINT_TEXT in text
    assert ">" not in text


def test_long_options_do_not_wrap():
    long_option = "x" * 150
    text = SelectionOverlay("T", [long_option]).render()

    assert f"> {long_option}" in text


def test_viewport_does_not_change_layout():
    overlay = SelectionOverlay("T", ["a", "b"])
    before = overlay.render()
    overlay.set_size(20, 5)

    assert overlay.render() == before


def test_markup_in_options_is_literal():
    text = SelectionOverlay("[bold]T[/bold]", ["[red]x[/red]"]).render()

    assert "[bold]T[/bold]" in text
    assert "[red]x[/red]" in text


def test_border_style_is_applied():
    panel = build_panel(SelectionOverlay("T", ["a"]), border_style="magenta")

    assert panel.border_style == "magenta"
    assert panel.expand is False
