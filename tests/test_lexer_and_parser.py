import pytest
from hypothesis import given, strategies as st

from lithp.errors import LithpSyntaxError
from lithp.reader.ast import AstNode, node_count
from lithp.reader.grammar import MAX_NESTING, lex, parse


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", [("number", "42", 0)]),
        ("-42", [("number", "-42", 0)]),
        ("- 42", [("symbol", "-", 0), ("number", "42", 2)]),
        ("(+ 1 2)", [("lparen", "(", 0), ("symbol", "+", 1), ("number", "1", 3), ("number", "2", 5), ("rparen", ")", 6)]),
        ("{head tail}", [("lbrace", "{", 0), ("symbol", "head", 1), ("symbol", "tail", 6), ("rbrace", "}", 10)]),
        ("  list  ", [("symbol", "list", 2)]),
        ("x", [("unknown", "x", 0)]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_root_is_anchored_by_regex_children():
    root = parse("1 2")
    assert root.tag == ">"
    assert [c.tag for c in root.children] == ["regex", "expr|number|regex", "expr|number|regex", "regex"]
    assert [c.contents for c in root.children] == ["", "1", "2", ""]


def test_empty_input_parses_to_bare_root():
    root = parse("")
    assert [c.tag for c in root.children] == ["regex", "regex"]


@pytest.mark.parametrize(
    "source,tag",
    [
        ("+", "expr|symbol|char"),
        ("/", "expr|symbol|char"),
        ("join", "expr|symbol|string"),
        ("-7", "expr|number|regex"),
        ("()", "expr|sexpr|>"),
        ("{}", "expr|qexpr|>"),
    ]
)
def test_expression_tags(source, tag):
    assert parse(source).children[1].tag == tag


def test_compound_keeps_bracket_children():
    sexpr = parse("(+ 1 {2})").children[1]
    assert [c.contents for c in sexpr.children] == ["(", "+", "1", "", ")"]
    qexpr = sexpr.children[3]
    assert qexpr.tag == "expr|qexpr|>"
    assert [(c.tag, c.contents) for c in qexpr.children] == [("char", "{"), ("expr|number|regex", "2"), ("char", "}")]


def test_nodes_record_row_and_column():
    sexpr = parse("  (+ 10)").children[1]
    assert (sexpr.row, sexpr.col) == (1, 3)
    assert (sexpr.children[2].row, sexpr.children[2].col) == (1, 6)


def test_node_count_counts_every_node():
    # root + 2 anchors + sexpr + '(' + '+' + '1' + '2' + ')'
    assert node_count(parse("(+ 1 2)")) == 9
    assert node_count(AstNode("x")) == 1


@pytest.mark.parametrize(
    "source,row,col,found",
    [
        ("(+ 1 x)", 1, 6, "'x'"),
        ("(+ 1 2", 1, 7, "end of input"),
        (")", 1, 1, "')'"),
        ("{1 2)", 1, 5, "')'"),
        ("foo", 1, 1, "'f'"),
        ("(+ 1\n2 ?)", 2, 3, "'?'"),
    ]
)
def test_syntax_errors_report_position(source, row, col, found):
    with pytest.raises(LithpSyntaxError) as info:
        parse(source)
    err = info.value
    assert (err.row, err.col, err.found) == (row, col, found)
    assert str(err).startswith(f"<stdin>:{row}:{col}: error: expected ")
    assert str(err).endswith(f"at {found}")


def test_syntax_error_lists_expected_closer():
    with pytest.raises(LithpSyntaxError) as info:
        parse("{1 2")
    assert info.value.expected == ["number", "symbol", "'('", "'{'", "'}'"]
    assert info.value.description == "expected one of number, symbol, '(', '{' or '}' at end of input"


def test_syntax_error_uses_given_filename():
    with pytest.raises(LithpSyntaxError) as info:
        parse("(", filename="<test>")
    assert str(info.value).startswith("<test>:1:2:")


# -------------------------------
# Strategies
# -------------------------------
atom_strat = st.one_of(
    st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1).map(str),
    st.sampled_from(["+", "-", "*", "/", "list", "head", "tail", "join", "eval"]),
)

expr_strat = st.recursive(
    atom_strat,
    lambda inner: st.tuples(st.sampled_from(["()", "{}"]), st.lists(inner, max_size=4)).map(
        lambda t: t[0][0] + " ".join(t[1]) + t[0][1]
    ),
    max_leaves=12,
)


@given(st.lists(expr_strat, max_size=3))
def test_parser_accepts_grammar_sentences(exprs):
    source = " ".join(exprs)
    root = parse(source)
    assert root.children[0].tag == "regex"
    assert root.children[-1].tag == "regex"
    assert len(root.children) == len(exprs) + 2


@given(st.text(max_size=20))
def test_parser_never_crashes_unexpectedly(source):
    try:
        parse(source)
    except LithpSyntaxError:
        pass


def test_nesting_at_the_limit_is_accepted():
    root = parse("(" * MAX_NESTING + ")" * MAX_NESTING)
    assert node_count(root) == 3 + 3 * MAX_NESTING


@pytest.mark.parametrize("open_,close", [("(", ")"), ("{", "}")])
def test_nesting_past_the_limit_is_a_syntax_error(open_, close):
    depth = MAX_NESTING + 1
    with pytest.raises(LithpSyntaxError) as info:
        parse(open_ * depth + close * depth)
    err = info.value
    assert (err.row, err.col, err.found) == (1, depth, repr(open_))
    assert err.description == f"expression nested deeper than {MAX_NESTING} levels at {open_!r}"


def test_nesting_depth_is_per_branch():
    deep = "(" * MAX_NESTING + ")" * MAX_NESTING
    parse(f"{deep} {deep}")
