"""The lithp value model.

A value is one of five variants. Compound variants (SExpr, QExpr) own their
children outright: the reader only ever builds strictly smaller subtrees, and
the evaluator moves children out with pop/take rather than sharing them.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Union


class ErrorKind(Enum):
    INVALID_NUMBER = "Invalid Number!"
    NON_NUMBER_OPERAND = "Cannot operate on a non-number!"
    DIVISION_BY_ZERO = "Division by Zero!"
    MISSING_OPERATOR_SYMBOL = "S-expression does not start with a symbol!"


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned: operator names repeat on every line read
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Number:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    __hash__ = None  # accumulated in place by the arithmetic fold

    def __repr__(self):
        return f"Number({self.value!r})"


class Error:
    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> Error:
        return cls(kind.value)

    @property
    def kind(self) -> ErrorKind | None:
        """The ErrorKind this message belongs to, None for free-form errors."""
        try:
            return ErrorKind(self.message)
        except ValueError:
            return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("err", self.message))

    def __repr__(self):
        return f"Error({self.message!r})"


class _Expr:
    """Ordered, exclusively owned children shared by SExpr and QExpr."""

    __slots__ = ("children",)

    def __init__(self, children: Iterable[Lval] | None = None):
        self.children: list[Lval] = list(children) if children is not None else []

    def add(self, child: Lval) -> _Expr:
        self.children.append(child)
        return self

    def pop(self, i: int = 0) -> Lval:
        return self.children.pop(i)

    def take(self, i: int) -> Lval:
        # Keep only the i-th child; the remaining siblings are dropped with us.
        value = self.children.pop(i)
        self.children.clear()
        return value

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.children == other.children

    __hash__ = None  # mutable

    def __repr__(self):
        return f"{type(self).__name__}({self.children!r})"


class SExpr(_Expr):
    __slots__ = ()


class QExpr(_Expr):
    __slots__ = ()


Lval = Union[Number, Error, Symbol, SExpr, QExpr]
