"""Tests for the single-line text editor."""

import random

import pytest

from feedboat.core.text_line import TextLineEditor


def assert_invariants(editor: TextLineEditor):
    assert 0 <= editor.viewport_offset <= editor.cursor_position <= len(editor.text)


class TestEditing:
    """Tests for insert and delete operations."""

    def test_put_chars_into_empty_editor(self):
        editor = TextLineEditor()
        editor.put_char("h")
        editor.put_char("i")
        assert editor.text == "hi"
        assert editor.cursor_position == 2

    def test_insert_in_the_middle(self):
        editor = TextLineEditor("ac")
        editor.move_left(1)
        editor.insert_char("b")
        assert editor.text == "abc"
        assert editor.cursor_position == 2

    def test_delete_at_cursor(self):
        editor = TextLineEditor("abc")
        editor.move_home()
        editor.delete_at_cursor()
        assert editor.text == "bc"
        assert editor.cursor_position == 0

    def test_delete_at_end_is_noop(self):
        editor = TextLineEditor("abc")
        editor.delete_at_cursor()
        assert editor.text == "abc"
        assert editor.cursor_position == 3

    def test_backspace_removes_left_char(self):
        editor = TextLineEditor("abc")
        editor.delete_before_cursor()
        assert editor.text == "ab"
        assert editor.cursor_position == 2

    def test_backspace_at_start_is_noop(self):
        editor = TextLineEditor("abc")
        editor.move_home()
        editor.delete_before_cursor()
        assert editor.text == "abc"
        assert editor.cursor_position == 0

    def test_backspace_on_empty_text(self):
        editor = TextLineEditor()
        editor.delete_before_cursor()
        editor.delete_at_cursor()
        assert editor.text == ""
        assert editor.cursor_position == 0

    def test_non_ascii_characters_count_as_one(self):
        editor = TextLineEditor()
        for c in "ДОУ":
            editor.put_char(c)
        assert editor.cursor_position == 3
        editor.delete_before_cursor()
        assert editor.text == "ДО"


class TestCursorMovement:
    """Tests for cursor moves."""

    def test_move_right_saturates_at_end(self):
        editor = TextLineEditor("abc")
        editor.move_home()
        editor.move_right(10)
        assert editor.cursor_position == 3

    def test_move_left_saturates_at_start(self):
        editor = TextLineEditor("abc")
        editor.move_left(10)
        assert editor.cursor_position == 0

    def test_move_home_and_end(self):
        editor = TextLineEditor("hello")
        editor.move_home()
        assert editor.cursor_position == 0
        editor.move_end()
        assert editor.cursor_position == 5

    def test_set_text_round_trip(self):
        editor = TextLineEditor("old")
        editor.set_text("new text")
        assert editor.text == "new text"
        assert editor.cursor_position == len("new text")
        assert_invariants(editor)

    def test_set_text_after_render_keeps_cursor_visible(self):
        editor = TextLineEditor()
        editor.visible_slice(5)
        editor.set_text("x" * 20)
        assert editor.display_cursor_offset() <= 4


class TestViewport:
    """Tests for horizontal scrolling."""

    def test_short_text_is_fully_visible(self):
        editor = TextLineEditor("quit")
        assert editor.visible_slice(10) == "quit"
        assert editor.viewport_offset == 0
        assert editor.display_cursor_offset() == 4

    def test_typing_past_width_scrolls_right(self):
        editor = TextLineEditor()
        for c in "abcdefgh":
            editor.put_char(c)
            editor.visible_slice(5)
        # One column stays free for the caret
        assert editor.viewport_offset == 4
        assert editor.visible_slice(5) == "efgh"
        assert editor.display_cursor_offset() == 4

    def test_cursor_at_49_of_50_in_width_10(self):
        text = "".join(chr(ord("a") + i % 26) for i in range(50))
        editor = TextLineEditor(text)
        editor.move_home()
        editor.move_right(49)
        assert editor.cursor_position == 49

        window = editor.visible_slice(10)

        assert len(window) <= 10
        assert text[49] == window[editor.display_cursor_offset()]
        assert editor.display_cursor_offset() <= 9
        assert window == text[40:50]

    def test_moving_left_past_viewport_scrolls_left(self):
        editor = TextLineEditor("x" * 30)
        editor.visible_slice(10)
        assert editor.viewport_offset == 21
        editor.move_left(25)
        assert editor.cursor_position == 5
        assert editor.viewport_offset == 5
        editor.visible_slice(10)
        assert editor.display_cursor_offset() == 0

    def test_shrinking_text_pulls_viewport_back(self):
        editor = TextLineEditor("y" * 20)
        editor.visible_slice(5)
        for _ in range(18):
            editor.delete_before_cursor()
        assert editor.text == "yy"
        assert editor.cursor_position == 2
        assert editor.viewport_offset == 2
        assert editor.visible_slice(5) == ""
        assert editor.display_cursor_offset() == 0

    def test_width_one_shows_only_the_caret_column(self):
        editor = TextLineEditor("abc")
        window = editor.visible_slice(1)
        assert editor.display_cursor_offset() == 0
        assert window == ""

    @pytest.mark.parametrize("width", [0, -3])
    def test_width_below_one_treated_as_one(self, width):
        editor = TextLineEditor("abc")
        editor.visible_slice(width)
        assert editor.display_cursor_offset() == 0


def test_invariants_hold_for_random_operation_sequences():
    rng = random.Random(42)
    for _ in range(50):
        editor = TextLineEditor()
        for _ in range(200):
            op = rng.randrange(6)
            if op == 0:
                editor.insert_char(rng.choice("abcxyz "))
            elif op == 1:
                editor.delete_at_cursor()
            elif op == 2:
                editor.delete_before_cursor()
            elif op == 3:
                editor.move_left(rng.randrange(0, 5))
            elif op == 4:
                editor.move_right(rng.randrange(0, 5))
            else:
                width = rng.randrange(1, 12)
                editor.visible_slice(width)
                assert editor.cursor_position - editor.viewport_offset <= width - 1
            assert_invariants(editor)
