"""
  lithp grammar: lexer and recursive-descent parser

    number : /-?[0-9]+/ ;
    symbol : '+' | '-' | '*' | '/'
           | "list" | "head" | "tail" | "join" | "eval" ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lithp  : /^/ <expr>* /$/ ;

- Emits a generic AstNode tree rather than values; lithp.reader.reader turns
  that tree into Lval values.
- number is tried before symbol, so "-5" is a literal and "- 5" is negation.
- Malformed input raises LithpSyntaxError with the 1-based row/column of the
  offending token. Brackets nested deeper than MAX_NESTING are rejected the
  same way, so later recursive stages never exhaust the stack.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lithp.errors import LithpSyntaxError
from lithp.reader.ast import AstNode


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<number>-?[0-9]+)"  # number literal
    r"|(?P<symbol>[+\-*/]|list|head|tail|join|eval)"  # operators and reserved words
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<unknown>\S)"  # anything else is reported by the parser
    r")",
)

CLOSERS: dict[str, str] = {"lparen": ")", "lbrace": "}"}
COMPOUND_TAGS: dict[str, str] = {"lparen": "expr|sexpr|>", "lbrace": "expr|qexpr|>"}

EXPR_EXPECTED = ["number", "symbol", "'('", "'{'"]

# Reader, evaluator and printer recurse once or twice per level; keep well
# inside the interpreter's recursion limit.
MAX_NESTING = 256

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm) is not None:
                yield nm, m.group(nm), m.start(nm)
                break
        pos = m.end()


class Parser:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.depth = 0

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def position(self, offset: int) -> tuple[int, int]:
        row = self.source.count("\n", 0, offset) + 1
        col = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        return row, col

    def error(self, expected: list[str]) -> LithpSyntaxError:
        tok_type, tok_val, offset = self.peek()
        found = "end of input" if tok_type is None else repr(tok_val)
        row, col = self.position(offset)
        return LithpSyntaxError(self.filename, row, col, expected, found)

    def parse(self) -> AstNode:
        root = AstNode(">", children=[AstNode("regex")])
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            if tok_type not in ("number", "symbol", "lparen", "lbrace"):
                raise self.error(EXPR_EXPECTED + ["end of input"])
            root.children.append(self.parse_expr())
        row, col = self.position(len(self.source))
        root.children.append(AstNode("regex", row=row, col=col))
        return root

    def parse_expr(self) -> AstNode:
        tok_type, tok_val, offset = self.peek()
        row, col = self.position(offset)

        if tok_type == "number":
            self.advance()
            return AstNode("expr|number|regex", tok_val, row=row, col=col)

        if tok_type == "symbol":
            self.advance()
            kind = "char" if len(tok_val) == 1 else "string"
            return AstNode(f"expr|symbol|{kind}", tok_val, row=row, col=col)

        if tok_type in COMPOUND_TAGS:
            if self.depth >= MAX_NESTING:
                raise LithpSyntaxError(
                    self.filename, row, col, [], repr(tok_val),
                    reason=f"expression nested deeper than {MAX_NESTING} levels",
                )
            self.advance()
            self.depth += 1
            closer = CLOSERS[tok_type]
            node = AstNode(COMPOUND_TAGS[tok_type], row=row, col=col)
            node.children.append(AstNode("char", tok_val, row=row, col=col))
            while True:
                inner_type, inner_val, inner_offset = self.peek()
                if inner_type is not None and inner_val == closer:
                    self.advance()
                    inner_row, inner_col = self.position(inner_offset)
                    node.children.append(AstNode("char", closer, row=inner_row, col=inner_col))
                    self.depth -= 1
                    return node
                if inner_type not in ("number", "symbol", "lparen", "lbrace"):
                    raise self.error(EXPR_EXPECTED + [repr(closer)])
                node.children.append(self.parse_expr())

        raise self.error(EXPR_EXPECTED)


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole input line into its root node or raise LithpSyntaxError."""
    return Parser(source, filename).parse()
