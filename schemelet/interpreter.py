from __future__ import annotations

from typing import Iterable

from schemelet import SExpression, LispValue
from schemelet.config import Config
from schemelet.context import Context, PrimitiveSpec, initialize_runtime
from schemelet.evaluation.evaluator import evaluate_at_top_level
from schemelet.reader.parser import lex, TokenStream
from schemelet.types.nil import Nil


class Interpreter:
    """
    Reads and evaluates schemelet code against one runtime context.
    Definitions persist across calls.
    """

    def __init__(
        self,
        config: Config | None = None,
        primitives: Iterable[PrimitiveSpec] | None = None,
    ):
        self.ctx: Context = initialize_runtime(primitives, config)

    @property
    def global_frame(self):
        return self.ctx.global_frame

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate_at_top_level(expr, self.ctx)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order.

        Returns Nil for no expressions, the value for one, else all values.
        """
        stream = TokenStream(lex(code))
        results: list[LispValue] = [self.eval_expr(expr) for expr in stream.parse_all()]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
