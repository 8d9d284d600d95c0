"""Tree reader: converts a generic AstNode tree into lithp values."""

from __future__ import annotations

import re

from lithp.reader.ast import AstNode
from lithp.types import Lval, Number, Error, ErrorKind, Symbol, SExpr, QExpr

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

BRACKETS = frozenset("(){}")

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def lval_read_num(tree: AstNode) -> Lval:
    # The whole literal must be consumed and fit a signed 64-bit integer.
    if not _DECIMAL_RE.fullmatch(tree.contents):
        return Error.from_kind(ErrorKind.INVALID_NUMBER)
    x = int(tree.contents, 10)
    if not INT64_MIN <= x <= INT64_MAX:
        return Error.from_kind(ErrorKind.INVALID_NUMBER)
    return Number(x)


def lval_read(tree: AstNode) -> Lval:
    if "number" in tree.tag:
        return lval_read_num(tree)

    if "symbol" in tree.tag:
        return Symbol(tree.contents)

    expr = QExpr() if "qexpr" in tree.tag else SExpr()

    for child in tree.children:
        if child.contents in BRACKETS:
            continue
        if child.tag == "regex":
            continue
        expr.add(lval_read(child))

    return expr
