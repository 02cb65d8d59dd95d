"""Rules, facts and the comparison operators that connect them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """A comparison or logical operator used in a rule's condition."""

    EQUAL = 0
    GREATER_THAN = 1
    LESS_THAN = 2
    NOT_EQUAL = 3
    GREATER_THAN_OR_EQUAL = 4
    LESS_THAN_OR_EQUAL = 5
    AND = 6
    OR = 7

    def __str__(self) -> str:
        return _SYMBOLS.get(self, "unknown")


_SYMBOLS = {
    Operator.EQUAL: "==",
    Operator.GREATER_THAN: ">",
    Operator.LESS_THAN: "<",
    Operator.NOT_EQUAL: "!=",
    Operator.GREATER_THAN_OR_EQUAL: ">=",
    Operator.LESS_THAN_OR_EQUAL: "<=",
    Operator.AND: "AND",
    Operator.OR: "OR",
}

_PARSE_TABLE = {
    "==": Operator.EQUAL,
    ">": Operator.GREATER_THAN,
    "<": Operator.LESS_THAN,
    "!=": Operator.NOT_EQUAL,
    ">=": Operator.GREATER_THAN_OR_EQUAL,
    "<=": Operator.LESS_THAN_OR_EQUAL,
    "&": Operator.AND,
    "|": Operator.OR,
    "AND": Operator.AND,
    "OR": Operator.OR,
}


def operator_from_string(s: str) -> Operator:
    """Parse an operator symbol or keyword; raise ValueError if unknown."""
    try:
        return _PARSE_TABLE[s]
    except KeyError:
        raise ValueError("unknown operator: " + s) from None


@dataclass
class Fact:
    """A known value for an identifier."""

    identifier: str
    value: str


@dataclass
class Rule:
    """If ``identifier`` compares to ``value`` by ``operator``, conclude ``result``."""

    identifier: str
    operator: Operator
    value: str
    result: str

    def __str__(self) -> str:
        return f"If {self.identifier} {self.operator} {self.value} then {self.result}"


def create_rule(identifier: str, operator: str, value: str, result: str) -> Rule | None:
    """Build a rule from its text fields.

    Returns None when any field is empty. An unrecognised operator falls
    back to equality.
    """
    if not (identifier and operator and value and result):
        return None
    try:
        parsed = operator_from_string(operator)
    except ValueError:
        parsed = Operator.EQUAL
    return Rule(identifier=identifier, operator=parsed, value=value, result=result)