"""Core evaluator for lithp.

Only S-expressions reduce; every other value, Q-expressions included, is its
own value. Errors found among the evaluated children win over everything else.
"""

from __future__ import annotations

from lithp.types import Lval, Error, ErrorKind, Symbol, SExpr
from lithp.evaluation.operators import builtin_op


def lval_eval_sexpr(v: SExpr) -> Lval:
    for i, child in enumerate(v.children):
        v.children[i] = lval_eval(child)

    for i, child in enumerate(v.children):
        if isinstance(child, Error):
            return v.take(i)

    if len(v) == 0:
        return v

    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Symbol):
        v.children.clear()
        return Error.from_kind(ErrorKind.MISSING_OPERATOR_SYMBOL)

    return builtin_op(v.children, f.name)


def lval_eval(v: Lval) -> Lval:
    match v:
        case SExpr():
            return lval_eval_sexpr(v)
    # --- Everything else evaluates to itself ---
    return v
