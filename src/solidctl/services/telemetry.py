"""Timings for ``--verbose``: one service call and the stages inside it.

Telemetry is off until :func:`enable_telemetry` runs. While it is on,
:func:`traced` times a service method and returns its result with the
timings in ``meta["telemetry"]``, and :func:`trace_span` records one named
stage of the call in progress. Stages are a flat list; they do not nest.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from solidctl.services.result import ServiceResult

log = structlog.get_logger("solidctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("solidctl_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("solidctl_active_span", default=None)


@dataclass
class Span:
    """Wall-clock timing of a service call, or of one stage in it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    duration_ms: float = 0.0
    annotations: dict[str, Any] = field(default_factory=dict)
    stages: list[Span] = field(default_factory=list)

    def finish(self) -> None:
        self.duration_ms = (time.perf_counter() - self.started) * 1000

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.stages:
            data["stages"] = [stage.to_dict() for stage in self.stages]
        return data


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time one stage of the traced call in progress.

    Yields None when telemetry is off or no traced call is running.
    """
    call = _active.get() if _enabled.get() else None
    if call is None:
        yield None
        return

    stage = Span(name)
    call.stages.append(stage)
    try:
        yield stage
    finally:
        stage.finish()


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Time a service method and attach the timings to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        call = Span(func.__qualname__)
        token = _active.set(call)
        ok = False
        try:
            result = func(*args, **kwargs)
            ok = result.ok if isinstance(result, ServiceResult) else True
        finally:
            call.finish()
            _active.reset(token)
            log.debug(
                "span.complete",
                span_name=call.name,
                duration_ms=round(call.duration_ms, 2),
                ok=ok,
                stages=len(call.stages),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": call.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn timings on for the current context; the CLI calls this for ``-v``."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
