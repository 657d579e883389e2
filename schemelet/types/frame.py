"""Environment frames for schemelet.

A Frame stores bindings of Symbols to evaluated values and links to the frame
that encloses it. Lookup and mutation walk outward through `parent` links;
there is no other resolution rule.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from schemelet import LispValue
from schemelet.errors import UnboundSymbolError
from schemelet.types.symbol import Symbol


class Frame:
    """Mutable mapping from Symbols to values with a link to its parent."""

    __slots__ = ("bindings", "parent", "name", "captured", "destroyed")

    def __init__(self, parent: Optional[Frame] = None, name: str | None = None):
        self.bindings: dict[Symbol, LispValue] = {}
        self.parent: Frame | None = parent
        self.name: str | None = name
        # Set once a closure holds this frame (directly or through a child).
        self.captured: bool = False
        self.destroyed: bool = False

    def add_binding(self, symbol: Symbol, value: LispValue) -> None:
        """Bind `symbol` in this frame only, replacing any previous value."""
        assert not self.destroyed, f"binding into destroyed frame {self.name}"
        self.bindings[symbol] = value

    def chain(self) -> Iterator[Frame]:
        """Yield this frame, then each ancestor in order."""
        frame: Optional[Frame] = self
        while frame is not None:
            assert not frame.destroyed, f"lookup through destroyed frame {frame.name}"
            yield frame
            frame = frame.parent

    def find(self, symbol: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that binds `symbol`."""
        for frame in self.chain():
            if symbol in frame.bindings:
                return frame
        return None

    def mutate_binding(self, symbol: Symbol, value: LispValue) -> bool:
        """Update the nearest existing binding of `symbol`.

        Returns False, and creates nothing, when no frame on the chain binds it.
        """
        frame = self.find(symbol)
        if frame is None:
            return False
        frame.bindings[symbol] = value
        return True

    def get_binding(self, symbol: Symbol) -> LispValue:
        """Return the value of the nearest binding of `symbol`.

        Raises UnboundSymbolError if the symbol is unbound on the whole chain.
        """
        frame = self.find(symbol)
        if frame is None:
            raise UnboundSymbolError(f"unbound symbol: {symbol}", symbol)
        return frame.bindings[symbol]

    def mark_captured(self) -> None:
        for frame in self.chain():
            if frame.captured:
                break
            frame.captured = True

    def destroy(self) -> None:
        """Release the bindings. Only valid once nothing references the frame."""
        self.bindings.clear()
        self.destroyed = True

    def _write_bindings(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.bindings.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.name:
                buffer.write(f"{self.name} ")
            self._write_bindings(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Frame chain: ")
            parts = []
            frame = self
            while frame is not None:
                with StringIO() as frame_buffer:
                    frame._write_bindings(frame_buffer)
                    parts.append(frame_buffer.getvalue())
                frame = frame.parent
            buffer.write(" -> ".join(parts))
            buffer.write(">")
            return buffer.getvalue()
