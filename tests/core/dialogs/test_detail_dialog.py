"""Tests for DetailDialog."""

import pytest

from feedboat.core import events
from feedboat.core.dialog_stack import DialogStack
from feedboat.core.dialogs import DetailDialog, ListDialog
from feedboat.core.events import Char
from feedboat.core.frame import Frame


@pytest.fixture
def article():
    return DetailDialog("News", [f"line {i}" for i in range(20)])


def render(dialog, width=40, height=8):
    frame = Frame(width=width, height=height)
    dialog.render(frame)
    return frame


def test_render_shows_title_and_first_page(article):
    frame = render(article)

    assert frame.title == "feedboat - Article 'News'"
    assert frame.content == [f"line {i}" for i in range(5)]
    assert frame.highlighted is None
    assert frame.command_line is None
    assert frame.cursor is None


def test_header_lines_come_first():
    dialog = DetailDialog("x", ["body"], header=["Feed: f", ""])
    frame = render(dialog)
    assert frame.content == ["Feed: f", "", "body"]


def test_scroll_down_and_up(article):
    stack = DialogStack(article)
    render(article)

    article.handle_key(events.DOWN, stack)
    article.handle_key(Char("j"), stack)
    assert article.scroll_offset == 2
    assert render(article).content[0] == "line 2"

    article.handle_key(events.UP, stack)
    article.handle_key(Char("k"), stack)
    article.handle_key(Char("k"), stack)
    assert article.scroll_offset == 0


def test_page_keys_move_by_visible_height(article):
    stack = DialogStack(article)
    render(article)

    article.handle_key(events.PAGE_DOWN, stack)
    assert article.scroll_offset == 5
    article.handle_key(Char(" "), stack)
    assert article.scroll_offset == 10
    article.handle_key(events.PAGE_UP, stack)
    assert article.scroll_offset == 5


def test_home_and_end(article):
    stack = DialogStack(article)
    render(article)

    article.handle_key(events.END, stack)
    assert article.scroll_offset == 19
    assert render(article).content == ["line 19"]

    article.handle_key(events.HOME, stack)
    assert article.scroll_offset == 0


def test_scrolling_stops_at_last_line(article):
    stack = DialogStack(article)
    render(article)
    for _ in range(50):
        article.handle_key(events.DOWN, stack)
    assert article.scroll_offset == 19


def test_long_lines_are_wrapped_to_width():
    dialog = DetailDialog("x", ["alpha beta gamma delta"])
    frame = render(dialog, width=11)
    assert frame.content == ["alpha beta", "gamma delta"]


def test_widening_the_terminal_clamps_offset():
    dialog = DetailDialog("x", ["aaa bbb ccc ddd"])
    stack = DialogStack(dialog)
    render(dialog, width=3)
    for _ in range(3):
        dialog.handle_key(events.DOWN, stack)
    assert dialog.scroll_offset == 3

    frame = render(dialog, width=40)

    assert dialog.scroll_offset == 0
    assert frame.content == ["aaa bbb ccc ddd"]


def test_q_closes_article():
    root = ListDialog("root", ["a"])
    stack = DialogStack(root)
    dialog = DetailDialog("x", ["body"])
    stack.push(dialog)

    dialog.handle_key(Char("q"), stack)

    assert stack.current is root
