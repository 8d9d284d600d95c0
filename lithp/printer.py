from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from lithp.types import Lval, Number, Error, Symbol, SExpr, QExpr


def _write(buffer: StringIO, v: Lval) -> None:
    match v:
        case Number():
            buffer.write(str(v.value))
        case Error():
            buffer.write("Error: ")
            buffer.write(v.message)
        case Symbol():
            buffer.write(v.name)
        case SExpr():
            _write_expr(buffer, v, "(", ")")
        case QExpr():
            _write_expr(buffer, v, "{", "}")


def _write_expr(buffer: StringIO, v: SExpr | QExpr, open_: str, close: str) -> None:
    buffer.write(open_)
    for i, child in enumerate(v.children):
        if i:
            buffer.write(" ")
        _write(buffer, child)
    buffer.write(close)


def lval_str(v: Lval) -> str:
    """Render a value as source-like text. Never evaluates."""
    with StringIO() as buffer:
        _write(buffer, v)
        return buffer.getvalue()


def lval_print(v: Lval, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(lval_str(v))


def lval_println(v: Lval, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(lval_str(v) + "\n")
