"""Diagnostic trace capture for coded errors.

Functions decorated with hide_stack_frames() are internal: when a trace is
captured, every frame up to and including the outermost internal one is cut,
so the trace a caller sees starts at the caller's own code.

The number of frames kept is governed by a single process-wide limit,
`stack_trace_limit`, which the factory adjusts only inside override() blocks.
"""

import math
import sys
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import CodeType, FrameType
from typing import Any, TypeVar

from coded_errors.config import settings
from coded_errors.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_hidden_code: set[CodeType] = set()


class StackTraceLimit:
    """Maximum number of frames kept when a trace is captured.

    A limit created with ``writable=False`` (or frozen later) cannot change;
    override() then leaves it untouched and capture works with its value.
    """

    def __init__(self, value: float, *, writable: bool = True) -> None:
        self._value = value
        self._writable = writable

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        if not self._writable:
            raise AttributeError("stack trace limit is not writable")
        self._value = value

    @property
    def writable(self) -> bool:
        return self._writable

    def freeze(self) -> None:
        self._writable = False

    @contextmanager
    def override(self, value: float) -> Iterator[None]:
        """Set the limit to ``value`` for the duration of the block.

        The previous limit is restored on every exit path.
        """
        if not self._writable:
            logger.debug("stack_trace_limit_not_writable", requested=value, current=self._value)
            yield
            return

        previous = self._value
        self._value = value
        try:
            yield
        finally:
            self._value = previous


stack_trace_limit = StackTraceLimit(
    settings.stack_trace_limit,
    writable=settings.stack_trace_limit_writable,
)


def hide_stack_frames(fn: F) -> F:
    """Mark ``fn`` as internal so captured traces are cut above it."""
    _hidden_code.add(fn.__code__)
    return fn


def is_hidden_frame(frame: FrameType) -> bool:
    return frame.f_code in _hidden_code


def _visible_frames(frame: FrameType | None, limit: float) -> traceback.StackSummary:
    chain: list[FrameType] = []
    while frame is not None:
        chain.append(frame)
        frame = frame.f_back

    outermost_hidden = max(
        (index for index, candidate in enumerate(chain) if is_hidden_frame(candidate)),
        default=-1,
    )
    visible = chain[outermost_hidden + 1 :]
    if not math.isinf(limit):
        visible = visible[: max(int(limit), 0)]

    return traceback.StackSummary.extract(
        ((candidate, candidate.f_lineno) for candidate in visible),
        limit=len(visible),
    )


@hide_stack_frames
def capture_larger_stack_trace(error: BaseException) -> BaseException:
    """Attach the caller's trace, innermost frame first, to ``error.frames``."""
    with stack_trace_limit.override(math.inf):
        frames = _visible_frames(sys._getframe(), stack_trace_limit.value)
    error.frames = frames  # type: ignore[attr-defined]
    return error


def format_stack(header: str, frames: traceback.StackSummary) -> str:
    """Render ``header`` followed by ``frames`` in traceback layout."""
    lines = "".join(traceback.format_list(frames)).rstrip("\n")
    if not lines:
        return header
    return f"{header}\n{lines}"
