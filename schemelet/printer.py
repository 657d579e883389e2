"""Render schemelet values back to source-like text."""

from __future__ import annotations

from io import StringIO

from schemelet import LispValue
from schemelet.types.nil import NilType
from schemelet.types.procedure import Procedure
from schemelet.types.symbol import Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _write_atom(value: LispValue, buffer: StringIO, display: bool) -> None:
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, str):
        if display:
            buffer.write(value)
        else:
            buffer.write('"')
            buffer.write("".join(STRING_ESCAPES.get(c, c) for c in value))
            buffer.write('"')
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, NilType):
        buffer.write("()")
    elif isinstance(value, Procedure):
        buffer.write(str(value))
    else:
        # Host values handed back by a primitive
        buffer.write(f"#<{type(value).__name__} {value!r}>")


def _write(value: LispValue, buffer: StringIO, display: bool) -> None:
    # (is_punctuation, item) pairs, next to write last
    pending: list[tuple[bool, LispValue]] = [(False, value)]
    while pending:
        punctuation, item = pending.pop()
        if punctuation:
            buffer.write(item)
        elif isinstance(item, list):
            buffer.write("(")
            pending.append((True, ")"))
            for i in range(len(item) - 1, -1, -1):
                pending.append((False, item[i]))
                if i:
                    pending.append((True, " "))
        else:
            _write_atom(item, buffer, display)


def to_string(value: LispValue, display: bool = False) -> str:
    """Return the printed form of `value`.

    With `display`, strings are written without quotes or escapes, the way
    the `display` primitive shows them.
    """
    with StringIO() as buffer:
        _write(value, buffer, display)
        return buffer.getvalue()
