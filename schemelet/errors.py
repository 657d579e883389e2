from __future__ import annotations

from enum import Enum
from typing import Any


class Condition(Enum):
    """Classification carried by every SchemeError."""

    UNBOUND_SYMBOL = "unbound-symbol"
    MALFORMED_SYNTAX = "malformed-syntax"
    ARITY_MISMATCH = "arity-mismatch"
    NOT_CALLABLE = "not-callable"
    RESOURCE_EXHAUSTED = "resource-exhausted"
    # raised outside the evaluator core
    PRIMITIVE_FAILURE = "primitive-failure"
    READ_FAILURE = "read-failure"


class SchemeError(Exception):
    """ Base class for all schemelet errors"""

    condition: Condition

    def __init__(self, message: str, offender: Any = None):
        super().__init__(message)
        self.offender = offender

    def diagnostic(self) -> str:
        return f"{self.condition.value}: {self}"


class UnboundSymbolError(SchemeError):
    """ Raised when a symbol is looked up or set! before it is bound"""
    condition = Condition.UNBOUND_SYMBOL


class MalformedSyntaxError(SchemeError):
    """ Raised when a special form does not have its required shape"""
    condition = Condition.MALFORMED_SYNTAX


class ArityMismatchError(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""
    condition = Condition.ARITY_MISMATCH


class NotCallableError(SchemeError):
    """ Raised when the operator of a combination is not a procedure"""
    condition = Condition.NOT_CALLABLE


class ResourceExhaustedError(SchemeError):
    """ Raised when the frame stack or the native argument bound is exceeded"""
    condition = Condition.RESOURCE_EXHAUSTED


class PrimitiveError(SchemeError):
    """ Raised by a primitive procedure given arguments it cannot work with"""
    condition = Condition.PRIMITIVE_FAILURE


class ReaderError(SchemeError):
    """ Raised when source text cannot be read into expressions"""
    condition = Condition.READ_FAILURE


class IncompleteInputError(ReaderError):
    """ Raised when source text ends inside an unfinished expression"""
