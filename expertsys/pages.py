"""A stack of named screens, later ones drawn as centred modals."""

from __future__ import annotations

import urwid

MODAL_WIDTH = 40
MODAL_HEIGHT = 13


class Pages(urwid.WidgetPlaceholder):
    """Named pages shown as a stack.

    The first page fills the screen; every later page is drawn as a modal
    of fixed size centred over the pages beneath it and takes the focus.
    """

    def __init__(self) -> None:
        self._pages: dict[str, urwid.Widget] = {}
        super().__init__(urwid.SolidFill(" "))

    def add_page(self, name: str, widget: urwid.Widget) -> None:
        """Put a page on top of the stack, replacing any page of that name."""
        self._pages.pop(name, None)
        self._pages[name] = widget
        self._rebuild()

    def remove_page(self, name: str) -> None:
        """Remove the named page; unknown names are ignored."""
        if self._pages.pop(name, None) is not None:
            self._rebuild()

    def has_page(self, name: str) -> bool:
        return name in self._pages

    def page_names(self) -> list[str]:
        """Page names from bottom to top."""
        return list(self._pages)

    def _rebuild(self) -> None:
        widgets = iter(self._pages.values())
        shown = next(widgets, None)
        if shown is None:
            self.original_widget = urwid.SolidFill(" ")
            return
        for top in widgets:
            shown = urwid.Overlay(
                top, shown, "center", MODAL_WIDTH, "middle", MODAL_HEIGHT
            )
        self.original_widget = shown