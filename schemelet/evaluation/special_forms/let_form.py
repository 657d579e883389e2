from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.context import Context
from schemelet.errors import MalformedSyntaxError
from schemelet.evaluation.special_forms.shape import expect_symbol
from schemelet.types.frame import Frame
from schemelet.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    frame: Frame,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name value) ...) body ...)

    Initializers run left to right inside the new frame, so each one sees the
    bindings made before it. Body expressions run in order in the same frame
    and the last one gives the value. The frame is popped afterwards.
    """
    if len(tail) < 2:
        raise MalformedSyntaxError(
            "too few items in let, expected (let ((<symbol> <expr>)...) <body>)",
            [Symbol("let"), *tail],
        )
    bindings, *body = tail
    if not isinstance(bindings, list):
        raise MalformedSyntaxError(
            f"let bindings must be a list, got {bindings!r}", bindings
        )

    child = Frame(parent=frame, name="let")
    with ctx.frames.scope(child, release=True):
        for binding in bindings:
            if not isinstance(binding, list) or len(binding) != 2:
                raise MalformedSyntaxError(
                    f"let binding must be (<symbol> <expr>), got {binding!r}", binding
                )
            name = expect_symbol("let", binding[0], "binding name")
            child.add_binding(name, evaluate_fn(binding[1], child, ctx))
        result: LispValue = None
        for e in body:
            result = evaluate_fn(e, child, ctx)
        return result
