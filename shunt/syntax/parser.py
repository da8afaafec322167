"""Shunting-yard parser with juxtaposed application and recursive parentheses.

Each nesting level (top level, a parenthesized region, a parenthesized application
argument) gets its own output stack and operator stack. A level ends at end of input
or at a closing parenthesis, which it leaves unconsumed for the caller to check.
"""

from __future__ import annotations

from collections.abc import Sequence

from shunt.core.ast import Application, BinaryOp, Expr, Identifier, NumberLit, Parenthesized
from shunt.core.errors import ExpectedClosingParenthesis, NonAssociativeChain, UnbalancedExpression
from shunt.core.operators import DEFAULT_REGISTRY, Associativity, OperatorDefinition, OperatorRegistry
from shunt.core.tokens import Token, TokenKind
from shunt.syntax.tokenize import tokenize
from shunt.trace.event import ParseEventKind, new_event


def _leaf(token: Token) -> Expr:
    if token.kind is TokenKind.NUMBER:
        return NumberLit(node="NumberLit", value=token.value)
    return Identifier(node="Identifier", name=token.text)


def _describe(token: Token | None) -> str:
    if token is None:
        return "end of input"
    return f"{token.kind.value} {token.text!r} at offset {token.offset}"


def _non_assoc_conflict(top: OperatorDefinition, incoming: OperatorDefinition) -> bool:
    return top.precedence == incoming.precedence and Associativity.NON_ASSOC in (
        top.associativity,
        incoming.associativity,
    )


class _ShuntingYard:
    def __init__(
        self,
        tokens: Sequence[Token],
        *,
        registry: OperatorRegistry,
        strict_nonassoc: bool,
        trace: list[dict] | None,
    ) -> None:
        self.tokens = tokens
        self.registry = registry
        self.strict_nonassoc = strict_nonassoc
        self.trace = trace

    def _emit(self, kind: ParseEventKind, message: str, **data) -> None:
        if self.trace is not None:
            self.trace.append(new_event(kind, message, data=data))

    def _peek(self, index: int) -> Token | None:
        return self.tokens[index] if index < len(self.tokens) else None

    def parse_from(self, start: int, level: int = 0) -> tuple[Expr, int]:
        output: list[Expr] = []
        operators: list[Token] = []
        self._emit(ParseEventKind.ENTER, f"enter level {level}", level=level, index=start)

        i = start
        while i < len(self.tokens):
            token = self.tokens[i]
            if token.kind is TokenKind.NUMBER:
                output.append(_leaf(token))
                self._emit(ParseEventKind.PUSH_OPERAND, token.text, level=level, index=i)
                i += 1
            elif token.kind is TokenKind.OPERATOR:
                self._push_operator(token, output, operators, level, i)
                i += 1
            elif token.kind is TokenKind.IDENTIFIER:
                expr, i = self._parse_application(i, level)
                output.append(expr)
            elif token.kind is TokenKind.LPAREN:
                expr, i = self._parse_enclosed(i, level)
                output.append(expr)
                self._emit(ParseEventKind.PUSH_OPERAND, "(...)", level=level, index=i - 1)
            elif token.kind is TokenKind.RPAREN:
                # The caller consumes the `)`.
                break

        while operators:
            self._reduce(output, operators, level, i)
        expr = self._single(output, self._peek(i))
        self._emit(ParseEventKind.LEAVE, f"leave level {level}", level=level, index=i)
        return expr, i

    def _push_operator(
        self,
        token: Token,
        output: list[Expr],
        operators: list[Token],
        level: int,
        index: int,
    ) -> None:
        incoming = self.registry.lookup(token.text)
        while operators:
            top = self.registry.lookup(operators[-1].text)
            if self.strict_nonassoc and _non_assoc_conflict(top, incoming):
                raise NonAssociativeChain(operators[-1].text, token.text)
            if not top.reduces_before(incoming):
                break
            self._reduce(output, operators, level, index)
        operators.append(token)
        self._emit(
            ParseEventKind.PUSH_OPERATOR,
            token.text,
            level=level,
            index=index,
            precedence=incoming.precedence,
            associativity=incoming.associativity.value,
        )

    def _reduce(self, output: list[Expr], operators: list[Token], level: int, index: int) -> None:
        op = operators.pop()
        if len(output) < 2:
            raise UnbalancedExpression(
                f"operator {op.text!r} at offset {op.offset} is missing an operand"
            )
        right = output.pop()
        left = output.pop()
        output.append(BinaryOp(node="BinaryOp", left=left, op=op.text, right=right))
        self._emit(ParseEventKind.REDUCE, op.text, level=level, index=index)

    def _single(self, output: list[Expr], stop: Token | None) -> Expr:
        if len(output) == 1:
            return output[0]
        if not output:
            raise UnbalancedExpression(f"no expression before {_describe(stop)}")
        raise UnbalancedExpression(
            f"{len(output)} expressions without an operator between them before {_describe(stop)}"
        )

    def _parse_application(self, index: int, level: int) -> tuple[Expr, int]:
        callee = self.tokens[index]
        args: list[Expr] = []
        i = index + 1
        while (token := self._peek(i)) is not None and token.is_atom:
            if token.kind is TokenKind.LPAREN:
                arg, i = self._parse_enclosed(i, level)
                args.append(arg)
            else:
                args.append(_leaf(token))
                i += 1

        if not args:
            self._emit(ParseEventKind.PUSH_OPERAND, callee.text, level=level, index=index)
            return _leaf(callee), i
        self._emit(
            ParseEventKind.APPLY,
            callee.text,
            level=level,
            index=index,
            arity=len(args),
        )
        return Application(node="Application", callee=_leaf(callee), args=args), i

    def _parse_enclosed(self, index: int, level: int) -> tuple[Expr, int]:
        inner, close = self.parse_from(index + 1, level + 1)
        token = self._peek(close)
        if token is None:
            raise ExpectedClosingParenthesis("end of input")
        if token.kind is not TokenKind.RPAREN:
            raise ExpectedClosingParenthesis(token.kind.value)
        return Parenthesized(node="Parenthesized", inner=inner), close + 1


def parse_from(
    tokens: Sequence[Token],
    start: int = 0,
    *,
    registry: OperatorRegistry = DEFAULT_REGISTRY,
    strict_nonassoc: bool = False,
    trace: list[dict] | None = None,
) -> tuple[Expr, int]:
    """Parse one balanced expression starting at `start`.

    Returns the tree and the index of the first unconsumed token: either
    `len(tokens)` or the index of an unmatched `)`.
    """

    yard = _ShuntingYard(tokens, registry=registry, strict_nonassoc=strict_nonassoc, trace=trace)
    return yard.parse_from(start)


def parse(
    tokens: Sequence[Token],
    *,
    registry: OperatorRegistry = DEFAULT_REGISTRY,
    strict_nonassoc: bool = False,
    trace: list[dict] | None = None,
) -> Expr:
    """Parse a whole token sequence into a single tree."""

    expr, index = parse_from(
        tokens,
        0,
        registry=registry,
        strict_nonassoc=strict_nonassoc,
        trace=trace,
    )
    if index < len(tokens):
        raise UnbalancedExpression(f"unmatched closing parenthesis at offset {tokens[index].offset}")
    return expr


def parse_text(
    text: str,
    *,
    registry: OperatorRegistry = DEFAULT_REGISTRY,
    strict_nonassoc: bool = False,
    trace: list[dict] | None = None,
) -> Expr:
    """Tokenize and parse `text`."""

    return parse(tokenize(text), registry=registry, strict_nonassoc=strict_nonassoc, trace=trace)
