"""Primitive procedures installed into every global frame.

Each entry of PRIMITIVES is a (name, arity, callable) triple. The callable
receives already-evaluated arguments positionally and never sees a frame.
"""
from __future__ import annotations

import sys

from schemelet import LispValue
from schemelet.errors import PrimitiveError
from schemelet.printer import to_string
from schemelet.types.nil import Nil, NilType
from schemelet.types.procedure import Procedure
from schemelet.types.symbol import Symbol


def _number(name: str, value: LispValue) -> int:
    # bool is an int subclass but #t/#f are not numbers here
    if isinstance(value, bool) or not isinstance(value, int):
        raise PrimitiveError(f"{name}: expected a number, got {to_string(value)}", value)
    return value


def _pair(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list) or not value:
        raise PrimitiveError(f"{name}: expected a pair, got {to_string(value)}", value)
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: LispValue, b: LispValue) -> int:
    return _number("+", a) + _number("+", b)


def sub(a: LispValue, b: LispValue) -> int:
    return _number("-", a) - _number("-", b)


def mul(a: LispValue, b: LispValue) -> int:
    return _number("*", a) * _number("*", b)


def quotient(a: LispValue, b: LispValue) -> int:
    """Integer division truncating toward zero."""
    n, d = _number("quotient", a), _number("quotient", b)
    if d == 0:
        raise PrimitiveError("quotient: division by zero", b)
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def remainder(a: LispValue, b: LispValue) -> int:
    """Remainder with the sign of the dividend."""
    n, d = _number("remainder", a), _number("remainder", b)
    if d == 0:
        raise PrimitiveError("remainder: division by zero", b)
    return n - d * quotient(n, d)


# -------------------------------
# Comparison and logic
# -------------------------------
def num_eq(a: LispValue, b: LispValue) -> bool:
    return _number("=", a) == _number("=", b)


def lt(a: LispValue, b: LispValue) -> bool:
    return _number("<", a) < _number("<", b)


def gt(a: LispValue, b: LispValue) -> bool:
    return _number(">", a) > _number(">", b)


def lte(a: LispValue, b: LispValue) -> bool:
    return _number("<=", a) <= _number("<=", b)


def gte(a: LispValue, b: LispValue) -> bool:
    return _number(">=", a) >= _number(">=", b)


def logical_not(x: LispValue) -> bool:
    """Only #f is false."""
    return x is False


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity for symbols and procedures, value equality for other atoms."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        return not a and not b
    if type(a) is not type(b):
        return False
    return isinstance(a, (int, str, NilType)) and a == b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality, element by element for lists."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return is_eq(a, b)


# -------------------------------
# Lists
# -------------------------------
def cons(head: LispValue, tail: LispValue) -> list[LispValue]:
    if isinstance(tail, NilType):
        tail = []
    if not isinstance(tail, list):
        raise PrimitiveError(
            f"cons: second argument must be a list, got {to_string(tail)}", tail
        )
    return [head, *tail]


def car(x: LispValue) -> LispValue:
    return _pair("car", x)[0]


def cdr(x: LispValue) -> list[LispValue]:
    return _pair("cdr", x)[1:]


def is_null(x: LispValue) -> bool:
    return (isinstance(x, list) and not x) or isinstance(x, NilType)


def is_pair(x: LispValue) -> bool:
    return isinstance(x, list) and bool(x)


# -------------------------------
# Type predicates
# -------------------------------
def is_number(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_symbol(x: LispValue) -> bool:
    return isinstance(x, Symbol)


def is_string(x: LispValue) -> bool:
    return isinstance(x, str)


def is_boolean(x: LispValue) -> bool:
    return isinstance(x, bool)


def is_procedure(x: LispValue) -> bool:
    return isinstance(x, Procedure)


# -------------------------------
# Output
# -------------------------------
def display(x: LispValue) -> LispValue:
    sys.stdout.write(to_string(x, display=True))
    return Nil


def newline() -> LispValue:
    sys.stdout.write("\n")
    return Nil


PRIMITIVES: tuple[tuple[str, int, object], ...] = (
    ("+", 2, add),
    ("-", 2, sub),
    ("*", 2, mul),
    ("quotient", 2, quotient),
    ("remainder", 2, remainder),
    ("=", 2, num_eq),
    ("<", 2, lt),
    (">", 2, gt),
    ("<=", 2, lte),
    (">=", 2, gte),
    ("not", 1, logical_not),
    ("eq?", 2, is_eq),
    ("equal?", 2, is_equal),
    ("cons", 2, cons),
    ("car", 1, car),
    ("cdr", 1, cdr),
    ("null?", 1, is_null),
    ("pair?", 1, is_pair),
    ("number?", 1, is_number),
    ("symbol?", 1, is_symbol),
    ("string?", 1, is_string),
    ("boolean?", 1, is_boolean),
    ("procedure?", 1, is_procedure),
    ("display", 1, display),
    ("newline", 0, newline),
)
