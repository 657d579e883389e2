from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.evaluation.special_forms.shape import expect_length
from schemelet.types.frame import Frame


def quote_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    expect_length("quote", tail, 1, "(quote <expr>)")
    return tail[0]
