"""Arithmetic dispatcher for S-expression operators.

Operators are arity-free folds over Number operands. The reserved words of the
grammar (list, head, tail, join, eval) are recognised but inert: like any
name without a matching operation they leave the accumulator untouched.
"""

from __future__ import annotations

import logging
from enum import Enum

from lithp.types import Lval, Number, Error, ErrorKind

logger = logging.getLogger(__name__)


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    # reserved, not implemented
    LIST = "list"
    HEAD = "head"
    TAIL = "tail"
    JOIN = "join"
    EVAL = "eval"

    @property
    def is_arithmetic(self) -> bool:
        return self in (Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV)

    @classmethod
    def lookup(cls, name: str) -> Operator | None:
        try:
            return cls(name)
        except ValueError:
            return None


def _trunc_div(x: int, y: int) -> int:
    # Python's // floors; lithp division truncates toward zero.
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def builtin_op(operands: list[Lval], op: str) -> Lval:
    """Fold ``op`` left-to-right over ``operands``, consuming the list.

    ``operands`` must hold at least one value; the evaluator only calls this
    for expressions with an operator and one or more operands.
    """
    if not operands:
        raise ValueError("builtin_op needs at least one operand")
    for operand in operands:
        if not isinstance(operand, Number):
            operands.clear()
            return Error.from_kind(ErrorKind.NON_NUMBER_OPERAND)

    kind = Operator.lookup(op)
    x = operands.pop(0)

    # unary negation
    if kind is Operator.SUB and not operands:
        x.value = -x.value
        return x

    if kind is None or not kind.is_arithmetic:
        logger.debug("operator %r has no arithmetic; passing %r through", op, x)

    while operands:
        y = operands.pop(0)
        match kind:
            case Operator.ADD:
                x.value += y.value
            case Operator.SUB:
                x.value -= y.value
            case Operator.MUL:
                x.value *= y.value
            case Operator.DIV:
                if y.value == 0:
                    operands.clear()
                    return Error.from_kind(ErrorKind.DIVISION_BY_ZERO)
                x.value = _trunc_div(x.value, y.value)
            case _:
                pass

    return x
