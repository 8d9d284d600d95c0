from lithp.reader.ast import AstNode, node_count
from lithp.reader.grammar import parse, lex
from lithp.reader.reader import lval_read

__all__ = ["AstNode", "node_count", "parse", "lex", "lval_read"]
