from __future__ import annotations

import sys
from typing import ClassVar


class Symbol:
    """Interned symbol: one instance per name, compared by identity."""

    __slots__ = ("id", "__weakref__")

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        existing = cls._table.get(name)
        if existing is not None:
            return existing
        sym = super().__new__(cls)
        sym.id = sys.intern(name)
        cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
