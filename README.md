# expertsys

A terminal workspace for building a small expert system. It has a code
editor, a list of facts and a list of rules, and a form for adding entries
to each list. It is built on urwid.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
expertsys
```

Press Ctrl-C to quit. The mouse can be used as well as the keyboard.

The screen has three columns of equal width:

- **Code Editor**: a multi-line text box that shows "Enter your code
  here..." while it is empty. The line under it shows the cursor's row and
  column, both counted from zero.
- **TODO**, **Answers** and **Question**: empty bordered panes.
- **Facts** and **Rules**: lists with a "+Add new fact" or "+Add new rule"
  button under each. The focused entry is highlighted.

## Adding a rule or fact

Each button opens a centred form titled "Add New Rule" with four fields:
*Identifier*, *Operator*, *Value* and *Result*. **Save** adds an entry to
that button's list, and the entry reads like this:

```
If temperature > 30 then hot
```

An entry is added only when all four fields are filled in; if any is
empty, the form closes without adding anything. The operators recognised
are `==`, `!=`, `>`, `<`, `>=`, `<=`, `AND` (or `&`) and `OR` (or `|`); any
other operator text is saved as `==`. **Cancel** closes the form without
adding anything.

## Using the models in code

```python
from expertsys.models import Operator, create_rule, operator_from_string

rule = create_rule("temperature", ">", "30", "hot")
print(rule)                        # If temperature > 30 then hot
print(operator_from_string("&"))   # AND
assert rule.operator is Operator.GREATER_THAN
assert create_rule("", ">", "30", "hot") is None
```

`operator_from_string` raises `ValueError` for an operator it does not know.
`expertsys.models` also has a `Fact` dataclass holding an `identifier` and a
`value`.

## What it does not do

- Nothing draws conclusions: rules are never evaluated against facts, and
  the Answers and Question panes stay empty.
- The text in the code editor is not read or run.
- Entries in the lists cannot be edited or removed, and nothing is saved;
  the editor text and both lists are gone when the program exits.
- The editor has no text selection, so the position line only ever shows a
  single cursor position.