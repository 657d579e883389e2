import pytest

from schemelet import errors
from schemelet.errors import Condition


@pytest.mark.parametrize(
    "cls, condition",
    [
        (errors.UnboundSymbolError, Condition.UNBOUND_SYMBOL),
        (errors.MalformedSyntaxError, Condition.MALFORMED_SYNTAX),
        (errors.ArityMismatchError, Condition.ARITY_MISMATCH),
        (errors.NotCallableError, Condition.NOT_CALLABLE),
        (errors.ResourceExhaustedError, Condition.RESOURCE_EXHAUSTED),
        (errors.PrimitiveError, Condition.PRIMITIVE_FAILURE),
        (errors.ReaderError, Condition.READ_FAILURE),
        (errors.IncompleteInputError, Condition.READ_FAILURE),
    ],
)
def test_taxonomy(cls, condition):
    err = cls("boom", offender="x")
    assert isinstance(err, errors.SchemeError)
    assert err.condition is condition
    assert err.offender == "x"
    assert err.diagnostic() == f"{condition.value}: boom"


def test_diagnostic_names_offending_symbol(interp):
    with pytest.raises(errors.UnboundSymbolError) as excinfo:
        interp.eval("(+ 1 ghost)")
    assert excinfo.value.diagnostic() == "unbound-symbol: unbound symbol: ghost"


def test_error_inside_nested_scopes_restores_stack(interp):
    interp.eval("(define f (lambda (x) (let ((y x)) (car y))))")
    with pytest.raises(errors.PrimitiveError):
        interp.eval("(f 5)")
    assert interp.ctx.frames.depth == 1
    assert interp.eval("(f '(9))") == 9
