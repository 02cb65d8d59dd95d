"""The application's main screen and entry point."""

from __future__ import annotations

import urwid

from expertsys import editor, lists
from expertsys.pages import Pages

MAIN_PAGE = "main"


def _titled_box(title: str) -> urwid.Widget:
    return urwid.LineBox(urwid.SolidFill(" "), title=title)


def setup_layout(
    code_editor: urwid.Widget,
    position: urwid.Widget,
    rules_list: urwid.Widget,
    add_rule_button: urwid.Widget,
    add_fact_button: urwid.Widget,
    facts_list: urwid.Widget,
) -> urwid.Columns:
    """Three equal columns: editor, answer panes, and facts and rules."""
    left = urwid.Pile(
        [
            ("weight", 1, code_editor),
            ("given", 1, urwid.Filler(position)),
        ]
    )
    middle = urwid.Pile(
        [
            ("weight", 1, _titled_box("TODO")),
            ("weight", 3, _titled_box("Answers")),
            ("given", 5, _titled_box("Question")),
        ]
    )
    right = urwid.Pile(
        [
            ("weight", 15, facts_list),
            ("given", 5, urwid.Filler(add_fact_button)),
            ("weight", 15, rules_list),
            ("given", 5, urwid.Filler(add_rule_button)),
        ]
    )
    return urwid.Columns(
        [("weight", 2, left), ("weight", 2, middle), ("weight", 2, right)],
        focus_column=0,
    )


def init_ui() -> urwid.MainLoop:
    """Build every widget and return the event loop ready to run."""
    pages = Pages()

    code_editor = editor.create_code_editor()
    position = editor.create_position_view()
    rules_list = lists.create_rules_list_view()
    facts_list = lists.create_facts_list_view()

    add_rule_button = lists.create_add_rule_button(rules_list, pages)
    add_fact_button = lists.create_add_fact_button(facts_list, pages)

    editor.setup_code_editor_events(code_editor, position)

    layout = setup_layout(
        code_editor, position, rules_list, add_rule_button, add_fact_button, facts_list
    )
    pages.add_page(MAIN_PAGE, layout)

    return urwid.MainLoop(
        pages,
        palette=[*editor.PALETTE, *lists.PALETTE],
        handle_mouse=True,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the interactive application until interrupted."""
    loop = init_ui()
    try:
        loop.run()
    except KeyboardInterrupt:
        pass
    return 0