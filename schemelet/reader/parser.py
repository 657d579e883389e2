"""
  Lexer and parser for schemelet source text.

- Streaming, lazy parsing
- Emits Python values instead of cons cells:

    - lists -> Python list, () -> []
    - symbols -> Symbol (interned)
    - strings -> str
    - integers -> int
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from schemelet import SExpression
from schemelet.errors import IncompleteInputError, ReaderError
from schemelet.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>")'  # opening quote with no closing quote
    r"|(?P<atom>[^\s()'\";]+)"
)

INTEGER_RE = re.compile(r"[+-]?\d+\Z")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise ReaderError(f"unexpected character at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        if kind == "bad_string":
            raise IncompleteInputError(f"unterminated string starting at {pos}")
        if kind not in ("whitespace", "comment"):
            yield kind, m.group(kind)
        pos = m.end()


def unescape(literal: str) -> str:
    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(STRING_ESCAPES.get(nxt, nxt))
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def parse_atom(text: str) -> SExpression:
    if INTEGER_RE.match(text):
        return int(text)
    if text == "#t":
        return True
    if text == "#f":
        return False
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse the next expression, or return None at end of input.

        Open lists and pending quotes are kept on an explicit stack, so
        nesting depth is not limited by the Python call stack.
        """
        if self.peek()[0] is None:
            return None

        # None marks a quote still waiting for its expression
        open_items: list[Optional[list]] = []
        while True:
            tok_type, tok_val = self.advance()

            if tok_type is None:
                if open_items[-1] is None:
                    raise IncompleteInputError("expected an expression after '")
                raise IncompleteInputError("unmatched '('")

            if tok_type == "quote":
                open_items.append(None)
                continue

            if tok_type == "lparen":
                open_items.append([])
                continue

            if tok_type == "rparen":
                if not open_items or open_items[-1] is None:
                    raise ReaderError("unexpected ')'")
                value = open_items.pop()
            elif tok_type == "atom":
                value = parse_atom(tok_val)
            elif tok_type == "string":
                value = unescape(tok_val)
            else:
                raise ReaderError(f"unknown token: {tok_type} {tok_val}")

            while open_items and open_items[-1] is None:
                open_items.pop()
                value = [QUOTE, value]
            if not open_items:
                return value
            open_items[-1].append(value)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek()[0] is not None:
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
