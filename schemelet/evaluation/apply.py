"""Application engine for schemelet.

Two call paths, chosen by the runtime kind of the operator value:

- Closure: exact arity check, operands evaluated eagerly in the caller's
  frame, then the captured defining frame and a fresh parameter frame are
  pushed for the body and popped again, parameter frame first.
- NativeProcedure: exact arity check, bounded operand count, operands
  evaluated eagerly in the caller's frame, no frame pushed.

Anything else in operator position is not callable.
"""

from __future__ import annotations

from schemelet import EvaluatorFn, LispValue, SExpression
from schemelet.context import Context
from schemelet.errors import ArityMismatchError, NotCallableError, ResourceExhaustedError
from schemelet.types.frame import Frame
from schemelet.types.procedure import Closure, NativeProcedure


def check_arity(proc: Closure | NativeProcedure, operands: list[SExpression]) -> None:
    if len(operands) != proc.arity:
        raise ArityMismatchError(
            f"{proc} expects {proc.arity} argument{'s' if proc.arity != 1 else ''}, "
            f"got {len(operands)}",
            proc,
        )


def apply_closure(
    fn: Closure,
    operands: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Call a user closure.

    Parameters:
    - fn: the closure being applied.
    - operands: the unevaluated argument expressions from the call site.
    - frame: the caller's frame; every operand is evaluated there.
    - ctx: the interpreter context holding the frame stack.
    - evaluate_fn: evaluator used for operands and the body.
    """
    check_arity(fn, operands)
    args = [evaluate_fn(operand, frame, ctx) for operand in operands]

    with ctx.frames.scope(fn.env):
        params = Frame(parent=fn.env, name=fn.name or "lambda")
        with ctx.frames.scope(params, release=True):
            for formal, value in zip(fn.formals, args):
                params.add_binding(formal, value)
            return evaluate_fn(fn.body, params, ctx)


def apply_native(
    fn: NativeProcedure,
    operands: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    check_arity(fn, operands)
    if len(operands) > ctx.max_native_args:
        raise ResourceExhaustedError(
            f"too many arguments to native function {fn.name}: "
            f"{len(operands)} exceeds the limit of {ctx.max_native_args}",
            fn,
        )
    args = [evaluate_fn(operand, frame, ctx) for operand in operands]
    return fn(args)


def apply_procedure(
    head: LispValue,
    operands: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a closure or native procedure to unevaluated operands."""
    if isinstance(head, Closure):
        return apply_closure(head, operands, frame, ctx, evaluate_fn)
    elif isinstance(head, NativeProcedure):
        return apply_native(head, operands, frame, ctx, evaluate_fn)
    else:
        raise NotCallableError(f"called a non-callable value: {head!r}", head)
