"""The facts and rules lists, their "add" buttons and the rule entry form."""

from __future__ import annotations

from collections.abc import Callable

import urwid

from expertsys.models import Rule, create_rule
from expertsys.pages import Pages

PALETTE = [
    ("selected", "black", "dark green"),
    ("button", "white", "dark cyan"),
]

FACT_FORM_PAGE = "add_fact_form"
RULE_FORM_PAGE = "add_rule_form"
FORM_TITLE = "Add New Rule"
FIELD_LABELS = ("Identifier", "Operator", "Value", "Result")


class ItemList(urwid.WidgetWrap):
    """A bordered, titled list of single-line entries.

    The focused entry is highlighted only while the list itself has focus.
    """

    def __init__(self, title: str) -> None:
        self._walker = urwid.SimpleFocusListWalker([])
        self.title = title
        super().__init__(urwid.LineBox(urwid.ListBox(self._walker), title=title))

    def add_item(self, text: str) -> None:
        """Append an entry to the end of the list."""
        icon = urwid.SelectableIcon(text, 0)
        self._walker.append(urwid.AttrMap(icon, None, focus_map="selected"))

    def items(self) -> list[str]:
        """The text of every entry, in order."""
        return [entry.original_widget.text for entry in self._walker]


def create_facts_list_view() -> ItemList:
    return ItemList("Facts")


def create_rules_list_view() -> ItemList:
    return ItemList("Rules")


def add_fact(facts_list: ItemList, rule: Rule) -> None:
    facts_list.add_item(str(rule))


def add_rule(rules_list: ItemList, rule: Rule) -> None:
    rules_list.add_item(str(rule))


class RuleForm(urwid.WidgetWrap):
    """A modal form with four text fields and Save / Cancel buttons.

    Saving builds a rule from the fields and, when it is valid, hands it to
    ``add`` together with the target list. Either button closes the form's
    page.
    """

    def __init__(
        self,
        target_list: ItemList,
        pages: Pages,
        page_name: str,
        add: Callable[[ItemList, Rule], None],
    ) -> None:
        self.target_list = target_list
        self.pages = pages
        self.page_name = page_name
        self._add = add
        self.fields: dict[str, urwid.Edit] = {
            label: urwid.Edit(f"{label}: ") for label in FIELD_LABELS
        }
        buttons = urwid.GridFlow(
            [
                urwid.Button("Save", on_press=lambda _button: self.save()),
                urwid.Button("Cancel", on_press=lambda _button: self.cancel()),
            ],
            cell_width=10,
            h_sep=2,
            v_sep=0,
            align="center",
        )
        body = urwid.Pile([*self.fields.values(), urwid.Divider(), buttons])
        frame = urwid.LineBox(urwid.Filler(body, valign="top"), title=FORM_TITLE)
        super().__init__(frame)

    def values(self) -> tuple[str, str, str, str]:
        """The current (identifier, operator, value, result) texts."""
        identifier, operator, value, result = (
            self.fields[label].edit_text for label in FIELD_LABELS
        )
        return identifier, operator, value, result

    def save(self) -> Rule | None:
        """Add the rule described by the fields, if valid, and close the form."""
        rule = create_rule(*self.values())
        if rule is not None:
            self._add(self.target_list, rule)
        self.pages.remove_page(self.page_name)
        return rule

    def cancel(self) -> None:
        """Close the form without adding anything."""
        self.pages.remove_page(self.page_name)


def create_fact_form(facts_list: ItemList, pages: Pages) -> RuleForm:
    return RuleForm(facts_list, pages, FACT_FORM_PAGE, add_fact)


def create_rule_form(rules_list: ItemList, pages: Pages) -> RuleForm:
    return RuleForm(rules_list, pages, RULE_FORM_PAGE, add_rule)


def _bordered_button(label: str, on_press: Callable[[], None]) -> urwid.Widget:
    button = urwid.Button(label, on_press=lambda _button: on_press())
    return urwid.LineBox(urwid.AttrMap(button, "button", focus_map="button"))


def create_add_fact_button(facts_list: ItemList, pages: Pages) -> urwid.Widget:
    """A bordered button that opens the fact form as a modal page."""

    def open_form() -> None:
        pages.add_page(FACT_FORM_PAGE, create_fact_form(facts_list, pages))

    return _bordered_button("+Add new fact", open_form)


def create_add_rule_button(rules_list: ItemList, pages: Pages) -> urwid.Widget:
    """A bordered button that opens the rule form as a modal page."""

    def open_form() -> None:
        pages.add_page(RULE_FORM_PAGE, create_rule_form(rules_list, pages))

    return _bordered_button("+Add new rule", open_form)