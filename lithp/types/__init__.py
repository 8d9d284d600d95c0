from lithp.types.lval import Lval, Number, Error, ErrorKind, Symbol, SExpr, QExpr

__all__ = ["Lval", "Number", "Error", "ErrorKind", "Symbol", "SExpr", "QExpr"]
