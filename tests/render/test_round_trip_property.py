"""Plain-form round-trip property.

Random trees are not necessarily parse results themselves (a generated
`{a+b}*c` prints as `a + b * c`), so the property is checked one step removed:
once a tree has come out of the parser, printing it and parsing it again must
reproduce both the tree and the text.
"""

from __future__ import annotations

from hypothesis import example, given, settings
from hypothesis import strategies as st

from shunt.core.ast import Application, BinaryOp, Identifier, NumberLit, Parenthesized
from shunt.core.operators import DEFAULT_REGISTRY, OPERATOR_ALPHABET
from shunt.render.text import render_plain
from shunt.syntax.parser import parse_text


def _ident(name: str) -> Identifier:
    return Identifier(node="Identifier", name=name)


def _num(value: int) -> NumberLit:
    return NumberLit(node="NumberLit", value=value)


def _paren(inner) -> Parenthesized:
    return Parenthesized(node="Parenthesized", inner=inner)


def _app(callee: str, args: list) -> Application:
    return Application(node="Application", callee=_ident(callee), args=args)


def _binop(left, op: str, right) -> BinaryOp:
    return BinaryOp(node="BinaryOp", left=left, op=op, right=right)


identifiers = st.from_regex(r"[a-zA-Z][a-zA-Z0-9_]{0,3}", fullmatch=True)
operators = st.one_of(
    st.sampled_from(sorted(DEFAULT_REGISTRY.spellings())),
    st.text(alphabet=sorted(OPERATOR_ALPHABET), min_size=1, max_size=3),
)
leaves = st.one_of(identifiers.map(_ident), st.integers(min_value=0, max_value=10**6).map(_num))


def _extend(children):
    arguments = st.one_of(leaves, children.map(_paren))
    return st.one_of(
        children.map(_paren),
        st.builds(_app, identifiers, st.lists(arguments, min_size=1, max_size=3)),
        st.builds(_binop, children, operators, children),
    )


expressions = st.recursive(leaves, _extend, max_leaves=16)


@settings(max_examples=200, deadline=None)
@given(expressions)
@example(parse_text("8 ** 3 . (r <= z != s * 5) /= z + h 17 >= fn a1 a2 ^ m < (8 - q) !! 8"))
def test_plain_form_is_idempotent_under_reparse(expr) -> None:
    first_text = render_plain(expr)
    first = parse_text(first_text)
    second_text = render_plain(first)
    second = parse_text(second_text)

    assert second_text == first_text
    assert second == first
    assert render_plain(second) == second_text
