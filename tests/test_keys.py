"""Tests for key classification."""

import pytest
from readchar import key as rkey

from pickpanel.core.keys import KeyEvent, classify_key


@pytest.mark.parametrize(
    "raw,expected",
    [
        (rkey.UP, KeyEvent.UP),
        (rkey.DOWN, KeyEvent.DOWN),
        ("k", KeyEvent.VIM_UP),
        ("j", KeyEvent.VIM_DOWN),
        (rkey.ENTER, KeyEvent.CONFIRM),
        ("\r", KeyEvent.CONFIRM),
        ("\n", KeyEvent.CONFIRM),
        (rkey.ESC, KeyEvent.CANCEL),
        (rkey.CTRL_C, KeyEvent.CANCEL),
        ("q", KeyEvent.CANCEL),
    ],
)
def test_known_keys(raw, expected):
    assert classify_key(raw) == expected


@pytest.mark.parametrize("raw", ["K", "J", "Q", "x", " ", "", rkey.LEFT, rkey.RIGHT])
def test_everything_else_is_other(raw):
    assert classify_key(raw) == KeyEvent.OTHER


@pytest.mark.parametrize("second", ["j", "k", "q", "x", " ", rkey.ESC])
def test_escape_followed_by_key_cancels(second):
    """readchar returns a lone Esc joined to the next key typed."""
    assert classify_key(rkey.ESC + second) == KeyEvent.CANCEL


@pytest.mark.parametrize("raw", [rkey.ESC + "[", rkey.ESC + "O", rkey.ESC + "[Z"])
def test_escape_sequences_are_not_cancel(raw):
    assert classify_key(raw) == KeyEvent.OTHER


def test_direction_helpers():
    assert KeyEvent.UP.is_up and KeyEvent.VIM_UP.is_up
    assert KeyEvent.DOWN.is_down and KeyEvent.VIM_DOWN.is_down
    assert not KeyEvent.CONFIRM.is_up
    assert not KeyEvent.CONFIRM.is_down
    assert not KeyEvent.OTHER.is_up
