"""Core evaluator for schemelet.

Classifies an expression as a self-evaluating atom, a symbol reference or a
combination, and routes combinations to the special-form table or to the
application engine.
"""

from __future__ import annotations

import logging

from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.errors import ResourceExhaustedError
from schemelet.evaluation.apply import apply_procedure
from schemelet.evaluation.special_forms import special_form_handler
from schemelet.types.frame import Frame
from schemelet.types.procedure import Procedure
from schemelet.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, frame: Frame, ctx: Context) -> LispValue:
    """Evaluate `expr` in `frame`."""
    # Procedures are only ever produced by evaluation, never read.
    assert not isinstance(expr, Procedure), f"procedure used as an expression: {expr!r}"

    match expr:
        case Symbol():
            return frame.get_binding(expr)
        case [head, *operands]:
            handler = special_form_handler(head)
            if handler is not None:
                return handler(operands, frame, ctx, evaluate)
            fn = evaluate(head, frame, ctx)
            return apply_procedure(fn, operands, frame, ctx, evaluate)

    # --- Atoms (and the empty list) return as-is ---
    return expr


def evaluate_at_top_level(expr: SExpression, ctx: Context) -> LispValue:
    """Evaluate `expr` in the global frame of `ctx`.

    If evaluation fails the frame stack is cut back to where it was, so the
    caller may report the error and keep using the context.
    """
    depth = ctx.frames.depth
    try:
        return evaluate(expr, ctx.global_frame, ctx)
    except RecursionError:
        logger.debug("host recursion limit reached at frame depth %d", ctx.frames.depth)
        raise ResourceExhaustedError(
            "host stack exhausted before the maximum call depth was reached"
        ) from None
    finally:
        ctx.frames.truncate(depth)
