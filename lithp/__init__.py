# Core type aliases for lithp's data model.
# Every value the reader builds and the evaluator returns is one of the five
# variants in lithp.types: Number, Error, Symbol, SExpr, QExpr.
#
# Naming guidance:
# - Lval: the union of those variants, used in reader, evaluator and printer.
# - AstNode: the generic labelled syntax tree produced by lithp.reader.grammar.

from lithp.types import Lval, Number, Error, ErrorKind, Symbol, SExpr, QExpr

__version__ = "0.3.0"

__all__ = [
    "Lval",
    "Number",
    "Error",
    "ErrorKind",
    "Symbol",
    "SExpr",
    "QExpr",
]
