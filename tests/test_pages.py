import urwid
import pytest

from expertsys.pages import MODAL_HEIGHT, MODAL_WIDTH, Pages


def _lines(widget, size=(80, 24)):
    canvas = widget.render(size, focus=True)
    return [line.decode("utf-8") for line in canvas.text]


def test_pages_start_empty():
    pages = Pages()
    assert pages.page_names() == []
    assert not pages.has_page("main")
    assert all(line.strip() == "" for line in _lines(pages))


def test_add_pages_keeps_order():
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    pages.add_page("form", urwid.SolidFill("*"))
    assert pages.page_names() == ["main", "form"]
    assert pages.has_page("form")


def test_adding_existing_name_moves_it_to_top():
    pages = Pages()
    pages.add_page("a", urwid.SolidFill("a"))
    pages.add_page("b", urwid.SolidFill("b"))
    pages.add_page("a", urwid.SolidFill("c"))
    assert pages.page_names() == ["b", "a"]


def test_remove_page():
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    pages.add_page("form", urwid.SolidFill("*"))
    pages.remove_page("form")
    assert pages.page_names() == ["main"]
    assert not pages.has_page("form")


def test_remove_missing_page_is_ignored():
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    pages.remove_page("nothing")
    assert pages.page_names() == ["main"]


def test_base_page_fills_screen():
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    lines = _lines(pages)
    assert len(lines) == 24
    assert all(line == "#" * 80 for line in lines)


def test_later_page_drawn_as_centred_modal():
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    pages.add_page("form", urwid.SolidFill("*"))
    lines = _lines(pages)
    assert lines[0] == "#" * 80
    star_rows = [line for line in lines if "*" in line]
    assert len(star_rows) == MODAL_HEIGHT
    assert all(line.count("*") == MODAL_WIDTH for line in star_rows)


@pytest.mark.parametrize("remove", ["form"])
def test_removing_modal_restores_base(remove):
    pages = Pages()
    pages.add_page("main", urwid.SolidFill("#"))
    pages.add_page(remove, urwid.SolidFill("*"))
    pages.remove_page(remove)
    assert all("*" not in line for line in _lines(pages))