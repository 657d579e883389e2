"""Interpreter context: the global frame and the bounded active-frame stack.

A Context is passed explicitly through every evaluation call, so independent
interpreters can coexist in one process.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator

from schemelet import LispValue
from schemelet.config import Config
from schemelet.errors import ResourceExhaustedError
from schemelet.types.frame import Frame
from schemelet.types.procedure import NativeProcedure
from schemelet.types.symbol import Symbol

logger = logging.getLogger(__name__)

PrimitiveSpec = tuple[str, int, Callable[..., LispValue]]


class FrameStack:
    """Frames live on the current call path, innermost last."""

    __slots__ = ("_frames", "max_depth")

    def __init__(self, max_depth: int):
        self._frames: list[Frame] = []
        self.max_depth = max_depth

    @property
    def depth(self) -> int:
        return len(self._frames)

    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def push(self, frame: Frame) -> None:
        if len(self._frames) >= self.max_depth:
            raise ResourceExhaustedError(
                f"maximum call depth of {self.max_depth} frames exceeded",
                frame.name,
            )
        logger.debug("push frame %s (depth %d)", frame.name, len(self._frames) + 1)
        self._frames.append(frame)

    def pop(self) -> Frame:
        frame = self._frames.pop()
        logger.debug("pop frame %s (depth %d)", frame.name, len(self._frames))
        return frame

    def truncate(self, depth: int) -> None:
        """Drop every frame above `depth`."""
        del self._frames[depth:]

    @contextmanager
    def scope(self, frame: Frame, release: bool = False) -> Iterator[Frame]:
        """Keep `frame` on the stack for the duration of the block.

        With `release`, a frame no closure captured is destroyed on exit.
        """
        depth = len(self._frames)
        self.push(frame)
        try:
            yield frame
        finally:
            # Cut back to the depth on entry, even if an error escaped a
            # nested scope before it could pop.
            del self._frames[depth:]
            logger.debug("pop frame %s (depth %d)", frame.name, depth)
            if release and not frame.captured:
                frame.destroy()


class Context:
    """Everything one interpreter instance mutates while evaluating."""

    __slots__ = ("config", "global_frame", "frames")

    def __init__(self, config: Config | None = None):
        self.config: Config = config or Config()
        self.global_frame: Frame = Frame(name="global")
        self.frames: FrameStack = FrameStack(self.config.max_call_depth)
        self.frames.push(self.global_frame)

    @property
    def max_native_args(self) -> int:
        return self.config.max_native_args

    def install_primitives(self, primitives: Iterable[PrimitiveSpec]) -> None:
        count = 0
        for name, arity, fn in primitives:
            self.global_frame.add_binding(Symbol(name), NativeProcedure(name, arity, fn))
            count += 1
        logger.debug("installed %d primitives", count)


def initialize_runtime(
    primitives: Iterable[PrimitiveSpec] | None = None,
    config: Config | None = None,
) -> Context:
    """Create a context with its global frame and every primitive installed."""
    if primitives is None:
        from schemelet.builtin.primitives import PRIMITIVES
        primitives = PRIMITIVES
    ctx = Context(config)
    ctx.install_primitives(primitives)
    logger.debug(
        "runtime initialized: max depth %d, max native args %d",
        ctx.config.max_call_depth,
        ctx.config.max_native_args,
    )
    return ctx
