import pytest

from schemelet.errors import MalformedSyntaxError, UnboundSymbolError, Condition
from schemelet.evaluation.special_forms import SPECIAL_FORMS, SpecialForm, special_form_handler
from schemelet.types.nil import Nil
from schemelet.types.procedure import Closure
from schemelet.types.symbol import Symbol


def test_registry_covers_exactly_the_six_keywords():
    assert {str(s) for s in SPECIAL_FORMS} == {"define", "let", "set!", "lambda", "quote", "begin"}
    assert len(SpecialForm) == 6
    assert special_form_handler(Symbol("if")) is None
    assert special_form_handler(1) is None
    assert special_form_handler(Symbol("begin")) is SPECIAL_FORMS[SpecialForm.BEGIN.symbol]


# -----------------------------------------------------
# define
# -----------------------------------------------------

def test_define_returns_empty_value(interp):
    assert interp.eval("(define x 3)") is Nil


def test_define_names_anonymous_closure(interp):
    interp.eval("(define square (lambda (n) (* n n)))")
    square = interp.eval("square")
    assert isinstance(square, Closure)
    assert square.name == "square"
    interp.eval("(define also square)")
    assert interp.eval("also").name == "square"


@pytest.mark.parametrize(
    "code",
    [
        "(define)",
        "(define x)",
        "(define x 1 2)",
        "(define 1 2)",
        '(define "x" 2)',
        "(define (f) 1)",
    ],
)
def test_define_malformed(interp, code):
    with pytest.raises(MalformedSyntaxError) as excinfo:
        interp.eval(code)
    assert excinfo.value.condition is Condition.MALFORMED_SYNTAX


# -----------------------------------------------------
# let
# -----------------------------------------------------

def test_let_empty_binding_list(interp):
    assert interp.eval("(let () 5)") == 5


def test_let_body_sequence(interp):
    assert interp.eval("(let ((a 1)) (set! a 2) a)") == 2


def test_let_initializer_sees_outer_scope(interp):
    interp.eval("(define outer 7)")
    assert interp.eval("(let ((a outer)) a)") == 7


def test_let_duplicate_binding_last_wins(interp):
    assert interp.eval("(let ((a 1) (a 2)) a)") == 2


@pytest.mark.parametrize(
    "code",
    [
        "(let)",
        "(let ((x 1)))",
        "(let x x)",
        "(let (x) x)",
        "(let ((x)) x)",
        "(let ((x 1 2)) x)",
        "(let ((1 2)) 1)",
    ],
)
def test_let_malformed(interp, code):
    with pytest.raises(MalformedSyntaxError):
        interp.eval(code)


def test_let_malformed_binding_leaves_stack_balanced(interp):
    depth = interp.ctx.frames.depth
    with pytest.raises(MalformedSyntaxError):
        interp.eval("(let ((a 1) (2 3)) a)")
    assert interp.ctx.frames.depth == depth


# -----------------------------------------------------
# set!
# -----------------------------------------------------

def test_set_returns_empty_value(interp):
    interp.eval("(define x 1)")
    assert interp.eval("(set! x 2)") is Nil
    assert interp.eval("x") == 2


def test_set_value_evaluated_before_lookup_fails(interp, capsys):
    with pytest.raises(UnboundSymbolError) as excinfo:
        interp.eval('(set! missing (display "side effect"))')
    assert capsys.readouterr().out == "side effect"
    assert excinfo.value.offender is Symbol("missing")


def test_set_inside_closure_updates_captured_binding(interp):
    interp.eval(
        """
        (define box (let ((v 0)) (lambda (n) (begin (set! v (+ v n)) v))))
        """
    )
    assert interp.eval("(box 2)") == 2
    assert interp.eval("(box 3)") == 5


@pytest.mark.parametrize("code", ["(set!)", "(set! x)", "(set! x 1 2)", "(set! 1 2)"])
def test_set_malformed(interp, code):
    interp.eval("(define x 0)")
    with pytest.raises(MalformedSyntaxError):
        interp.eval(code)


# -----------------------------------------------------
# lambda
# -----------------------------------------------------

def test_lambda_builds_closure(interp):
    closure = interp.eval("(lambda (a b) (+ a b))")
    assert isinstance(closure, Closure)
    assert closure.arity == 2
    assert closure.formals == [Symbol("a"), Symbol("b")]
    assert closure.body == [Symbol("+"), Symbol("a"), Symbol("b")]
    assert closure.env is interp.global_frame


def test_lambda_body_is_not_evaluated_at_creation(interp):
    assert isinstance(interp.eval("(lambda () undefined-thing)"), Closure)


def test_lambda_captures_current_frame(interp):
    closure = interp.eval("(let ((k 1)) (lambda () k))")
    assert closure.env.name == "let"
    assert closure.env.bindings == {Symbol("k"): 1}


@pytest.mark.parametrize(
    "code",
    [
        "(lambda)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(lambda x x)",
        "(lambda (1) 1)",
        "(lambda ((x)) x)",
    ],
)
def test_lambda_malformed(interp, code):
    with pytest.raises(MalformedSyntaxError):
        interp.eval(code)


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote_atoms(interp):
    assert interp.eval("(quote x)") is Symbol("x")
    assert interp.eval("(quote 5)") == 5
    assert interp.eval("(quote (quote x))") == [Symbol("quote"), Symbol("x")]


@pytest.mark.parametrize("code", ["(quote)", "(quote a b)"])
def test_quote_malformed(interp, code):
    with pytest.raises(MalformedSyntaxError):
        interp.eval(code)


# -----------------------------------------------------
# begin
# -----------------------------------------------------

def test_begin_returns_last(interp):
    assert interp.eval("(begin 1 2 3)") == 3
    assert interp.eval("(begin 1)") == 1


def test_begin_runs_in_order(interp, capsys):
    interp.eval('(begin (display "a") (display "b") (display "c"))')
    assert capsys.readouterr().out == "abc"


def test_begin_uses_current_frame(interp):
    assert interp.eval("(let ((z 4)) (begin (set! z (* z z)) z))") == 16


def test_begin_empty_is_malformed(interp):
    with pytest.raises(MalformedSyntaxError):
        interp.eval("(begin)")
