"""Procedure values: user closures and host-provided native procedures."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from schemelet import SExpression, LispValue
from schemelet.types.frame import Frame
from schemelet.types.symbol import Symbol


class Closure:
    """A procedure created by `lambda`: formals, body and defining frame."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Frame,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = list(formals)
        self.body: SExpression = body
        # Strong reference: the closure keeps its defining frame alive.
        self.env: Frame = env
        self.name: str | None = name

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.name:
                buffer.write(f"#<procedure {self.name}>")
            else:
                buffer.write("#<lambda (")
                buffer.write(" ".join(str(f) for f in self.formals))
                buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class NativeProcedure:
    """A host procedure with fixed arity.

    `fn` receives already-evaluated arguments positionally and never sees a
    frame, so it cannot read or change the caller's bindings.
    """

    __slots__ = ("name", "arity", "fn")

    def __init__(self, name: str, arity: int, fn: Callable[..., LispValue]):
        self.name = name
        self.arity = arity
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(*args)

    def __str__(self) -> str:
        return f"#<native {self.name}/{self.arity}>"

    def __repr__(self) -> str:
        return str(self)


Procedure = (Closure, NativeProcedure)
