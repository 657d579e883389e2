from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.errors import UnboundSymbolError
from schemelet.evaluation.special_forms.shape import expect_length, expect_symbol
from schemelet.types.frame import Frame
from schemelet.types.nil import Nil


def set_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name value): update the nearest existing binding, never create one."""
    expect_length("set!", tail, 2, "(set! <symbol> <expr>)")
    name = expect_symbol("set!", tail[0], "first argument")

    value = evaluate_fn(tail[1], frame, ctx)
    if not frame.mutate_binding(name, value):
        raise UnboundSymbolError(f"unbound symbol: {name}", name)
    return Nil
