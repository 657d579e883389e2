import logging

from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.evaluation.special_forms.shape import expect_length, expect_symbol
from schemelet.types.frame import Frame
from schemelet.types.nil import Nil
from schemelet.types.procedure import Closure

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the current frame, but the binding always goes
    into the global frame, however deeply nested the define is.
    """
    expect_length("define", tail, 2, "(define <symbol> <expr>)")
    name = expect_symbol("define", tail[0], "first argument")

    value = evaluate_fn(tail[1], frame, ctx)
    if isinstance(value, Closure) and value.name is None:
        value.name = name.id
    ctx.global_frame.add_binding(name, value)
    logger.debug("define %s", name)
    return Nil
