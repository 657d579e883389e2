from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.errors import MalformedSyntaxError
from schemelet.evaluation.special_forms.shape import expect_length, expect_symbol
from schemelet.types.frame import Frame
from schemelet.types.procedure import Closure


def lambda_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body) takes exactly one body form, and the
    # parameter list is a proper list of symbols (no rest parameters).
    expect_length("lambda", tail, 2, "(lambda (<symbol>...) <body>)")
    params, body = tail

    if not isinstance(params, list):
        raise MalformedSyntaxError(
            f"lambda parameters must be a list of symbols, got {params!r}", params
        )
    formals = [expect_symbol("lambda", p, "parameter") for p in params]

    frame.mark_captured()
    return Closure(formals, body, frame)
