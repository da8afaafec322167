"""Expression tree node definitions."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class NumberLit(BaseModel):
    """Non-negative integer literal."""

    model_config = ConfigDict(frozen=True)

    node: Literal["NumberLit"]
    value: int = Field(ge=0)


class Identifier(BaseModel):
    """Bare name."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Identifier"]
    name: str = Field(min_length=1)


class Application(BaseModel):
    """Juxtaposed function application `callee arg1 arg2 ...`."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Application"]
    callee: "Expr"
    args: list["Expr"] = Field(min_length=1)


class Parenthesized(BaseModel):
    """Sub-expression wrapped in literal parentheses in the source."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Parenthesized"]
    inner: "Expr"


class BinaryOp(BaseModel):
    """Infix operator applied to two operands."""

    model_config = ConfigDict(frozen=True)

    node: Literal["BinaryOp"]
    left: "Expr"
    op: str = Field(min_length=1)
    right: "Expr"


Expr = Annotated[
    Union[
        NumberLit,
        Identifier,
        Application,
        Parenthesized,
        BinaryOp,
    ],
    Field(discriminator="node"),
]

for _model in (Application, Parenthesized, BinaryOp):
    _model.model_rebuild()


def parse_expr(data: dict) -> Expr:
    """Parse and validate a dict into an Expr."""

    return TypeAdapter(Expr).validate_python(data)


def expr_to_dict(expr: Expr) -> dict:
    """Serialize an Expr into a dict."""

    return expr.model_dump(exclude_none=True)
