"""Step timings for ``meetcount -v``.

A ``@traced`` service method opens a root span; ``trace_span`` blocks
inside it add child steps. The finished tree lands in
``ServiceResult.meta["telemetry"]`` and is logged as ``span.complete``.
With telemetry off both are pass-throughs.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Concatenate, ParamSpec, TypeVar

import structlog

if TYPE_CHECKING:
    from meetcount.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("meetcount_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("meetcount_span", default=None)

_P = ParamSpec("_P")
_S = TypeVar("_S")


@dataclass
class Span:
    """One timed step and the steps nested inside it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    duration_ms: float = 0.0
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    def stop(self) -> None:
        self.duration_ms = (time.perf_counter() - self.started) * 1000

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def set_telemetry(enabled: bool) -> None:
    """Turn span collection on or off for the current context."""
    _enabled.set(enabled)


def current_span() -> Span | None:
    """The innermost open span, or None outside a traced call."""
    return _active.get() if _enabled.get() else None


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step of the enclosing traced call.

    Yields None when telemetry is off or no traced call is running.
    """
    parent = current_span()
    if parent is None:
        yield None
        return

    span = Span(name)
    parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.stop()
        _active.reset(token)


def traced(
    method: Callable[Concatenate[_S, _P], ServiceResult],
) -> Callable[Concatenate[_S, _P], ServiceResult]:
    """Record a service method as a root span and attach it to the result."""

    @functools.wraps(method)
    def wrapper(self: _S, /, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return method(self, *args, **kwargs)

        root = Span(method.__name__)
        token = _active.set(root)
        try:
            result = method(self, *args, **kwargs)
        finally:
            root.stop()
            _active.reset(token)

        structlog.get_logger(__name__).debug(
            "span.complete",
            op=result.op,
            ok=result.ok,
            duration_ms=round(root.duration_ms, 2),
            steps=[child.name for child in root.children],
        )
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper
