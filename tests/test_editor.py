import urwid
import pytest

from expertsys.editor import (
    PLACEHOLDER,
    create_code_editor,
    create_position_view,
    cursor_position,
    position_markup,
    setup_code_editor_events,
)


def _lines(widget, size):
    canvas = widget.render(size, focus=False)
    return [line.decode("utf-8") for line in canvas.text]


def _edit(editor):
    widget = editor
    while not isinstance(widget, urwid.Edit):
        widget = widget.original_widget
    return widget


def _plain(markup):
    return urwid.Text(markup).text


def test_position_markup_for_cursor():
    assert _plain(position_markup(0, 0, 0, 0)) == "Row: 0, Column: 0 "


def test_position_markup_for_selection():
    text = _plain(position_markup(1, 2, 3, 4))
    assert text == "From Row: 1, Column: 2 - To Row: 3, To Column: 4 "


def test_position_markup_highlights_numbers():
    markup = position_markup(5, 7, 5, 7)
    highlighted = [part[1] for part in markup if isinstance(part, tuple)]
    assert [value.strip() for value in highlighted] == ["5", "7"]


def test_cursor_position_of_empty_editor():
    assert cursor_position(create_code_editor()) == (0, 0, 0, 0)


def test_cursor_position_counts_rows_and_columns():
    editor = create_code_editor()
    edit = _edit(editor)
    edit.set_edit_text("ab\ncd")
    edit.set_edit_pos(4)
    assert cursor_position(editor) == (1, 1, 1, 1)


def test_cursor_at_end_of_last_line():
    editor = create_code_editor()
    edit = _edit(editor)
    text = "first\nsecond line"
    edit.set_edit_text(text)
    edit.set_edit_pos(len(text))
    row, column, to_row, to_column = cursor_position(editor)
    assert (row, column) == (to_row, to_column)
    assert row == text.count("\n")
    assert column == len(text.split("\n")[-1])


def test_position_view_tracks_cursor():
    editor = create_code_editor()
    position = create_position_view()
    setup_code_editor_events(editor, position)
    assert position.text == "Row: 0, Column: 0 "
    edit = _edit(editor)
    edit.set_edit_text("x\nyz")
    edit.set_edit_pos(4)
    assert position.text == _plain(position_markup(*cursor_position(editor)))
    assert position.text.startswith("Row: 1,")


def test_position_view_tracks_typing():
    editor = create_code_editor()
    position = create_position_view()
    setup_code_editor_events(editor, position)
    edit = _edit(editor)
    edit.keypress((30,), "a")
    edit.keypress((30,), "b")
    assert edit.edit_text == "ab"
    assert position.text == _plain(position_markup(0, 2, 0, 2))


def test_empty_editor_shows_placeholder_and_title():
    lines = _lines(create_code_editor(), (40, 10))
    assert "Code Editor" in lines[0]
    assert any(PLACEHOLDER in line for line in lines)


def test_placeholder_hidden_once_text_entered():
    editor = create_code_editor()
    _edit(editor).set_edit_text("rule")
    lines = _lines(editor, (40, 10))
    assert not any(PLACEHOLDER in line for line in lines)
    assert any("rule" in line for line in lines)


def test_cursor_position_rejects_non_editor():
    with pytest.raises(TypeError):
        cursor_position(urwid.Text("plain"))