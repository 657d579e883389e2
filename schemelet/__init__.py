# Core type aliases for schemelet's data model.
# Plain Python values represent both code (forms) and runtime values:
# int, bool, str, Symbol, lists for list structure ([] is the empty list),
# Nil for the empty value, Closure and NativeProcedure for procedures.
# No explicit Cons type is defined.
#
# Naming guidance:
# - SExpression: forms as produced by the reader (code-as-data).
# - LispValue:  evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special forms and the applier
EvaluatorFn = Callable[..., LispValue]

from schemelet.context import Context, initialize_runtime  # noqa: E402
from schemelet.evaluation.evaluator import evaluate, evaluate_at_top_level  # noqa: E402
from schemelet.interpreter import Interpreter  # noqa: E402

__all__ = [
    "Context",
    "EvaluatorFn",
    "Interpreter",
    "LispValue",
    "SExpression",
    "evaluate",
    "evaluate_at_top_level",
    "initialize_runtime",
]
