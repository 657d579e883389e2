from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.errors import MalformedSyntaxError
from schemelet.types.frame import Frame
from schemelet.types.symbol import Symbol


def begin_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise MalformedSyntaxError(
            "begin requires at least one expression", [Symbol("begin")]
        )
    result: LispValue = None
    for e in tail:
        result = evaluate_fn(e, frame, ctx)
    return result
