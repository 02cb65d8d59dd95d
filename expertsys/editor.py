"""The code editor pane and the cursor position line beneath it."""

from __future__ import annotations

import urwid

PLACEHOLDER = "Enter your code here..."

PALETTE = [
    ("yellow", "yellow", "default"),
    ("red", "light red", "default"),
    ("placeholder", "dark gray", "default"),
]


class _CodeEdit(urwid.Edit):
    """A multi-line edit box that shows a placeholder while empty and
    emits ``moved`` whenever its cursor position is set."""

    signals = [*urwid.Edit.signals, "moved"]

    def __init__(self, placeholder: str = "") -> None:
        super().__init__(multiline=True, allow_tab=True)
        self.placeholder = placeholder

    def set_edit_pos(self, pos: int) -> None:
        super().set_edit_pos(pos)
        urwid.emit_signal(self, "moved", self)

    @property
    def edit_pos(self) -> int:
        return urwid.Edit.edit_pos.fget(self)

    @edit_pos.setter
    def edit_pos(self, pos: int) -> None:
        self.set_edit_pos(pos)

    def render(self, size, focus=False):
        if self.edit_text or not self.placeholder:
            return super().render(size, focus)
        text = urwid.Text(("placeholder", self.placeholder), wrap="clip")
        canvas = urwid.CompositeCanvas(text.render(size))
        if focus:
            canvas.cursor = (0, 0)
        return canvas


def _edit_of(editor: urwid.Widget) -> urwid.Edit:
    widget = editor
    while not isinstance(widget, urwid.Edit):
        inner = getattr(widget, "original_widget", None)
        if inner is None or inner is widget:
            raise TypeError("widget does not contain an edit box")
        widget = inner
    return widget


def create_code_editor() -> urwid.Widget:
    """A bordered, padded, multi-line editor titled "Code Editor"."""
    edit = _CodeEdit(placeholder=PLACEHOLDER)
    body = urwid.Filler(edit, valign="top", top=1, bottom=1)
    padded = urwid.Padding(body, left=2, right=2)
    return urwid.LineBox(padded, title="Code Editor")


def create_position_view() -> urwid.Text:
    """A right-aligned, single-line status text."""
    return urwid.Text("", align="right")


def position_markup(from_row: int, from_column: int, to_row: int, to_column: int) -> list:
    """Markup describing the cursor, or the selection when it spans text."""
    if (from_row, from_column) == (to_row, to_column):
        return [
            "Row: ",
            ("yellow", str(from_row)),
            ", Column: ",
            ("yellow", f"{from_column} "),
        ]
    return [
        ("red", "From"),
        " Row: ",
        ("yellow", str(from_row)),
        ", Column: ",
        ("yellow", str(from_column)),
        " - ",
        ("red", "To"),
        " Row: ",
        ("yellow", str(to_row)),
        ", To Column: ",
        ("yellow", f"{to_column} "),
    ]


def cursor_position(editor: urwid.Widget) -> tuple[int, int, int, int]:
    """Zero-based (from_row, from_column, to_row, to_column) of the cursor.

    The edit box has no selection, so both ends are the cursor itself.
    """
    edit = _edit_of(editor)
    before = edit.edit_text[: edit.edit_pos]
    row = before.count("\n")
    column = len(before) - (before.rfind("\n") + 1)
    return row, column, row, column


def setup_code_editor_events(code_editor: urwid.Widget, position: urwid.Text) -> None:
    """Keep ``position`` showing the editor's cursor as it moves."""
    edit = _edit_of(code_editor)

    def update(*_args) -> None:
        position.set_text(position_markup(*cursor_position(edit)))

    urwid.connect_signal(edit, "moved", update)
    urwid.connect_signal(edit, "postchange", update)
    update()