from __future__ import annotations

import logging

from lithp.types import Lval
from lithp.reader.ast import AstNode
from lithp.reader.grammar import parse
from lithp.reader.reader import lval_read
from lithp.evaluation.evaluator import lval_eval
from lithp.printer import lval_str
from lithp.errors import LithpSyntaxError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Wires grammar -> reader -> evaluator -> printer for one line at a time.
    Holds no state between calls; every line builds and drops its own tree.
    """

    def __init__(self, filename: str = "<stdin>"):
        self.filename = filename

    def parse(self, code: str) -> AstNode:
        try:
            return parse(code, self.filename)
        except LithpSyntaxError as ex:
            logger.debug("parse failed: %s", ex)
            raise

    def read(self, code: str) -> Lval:
        return lval_read(self.parse(code))

    def eval(self, code: str) -> Lval:
        return lval_eval(self.read(code))

    def eval_to_string(self, code: str) -> str:
        return lval_str(self.eval(code))
