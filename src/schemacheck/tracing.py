"""
Trace events emitted while a record is evaluated.

The engine reports what it does through a plain callback that receives a
TraceEvent. Tracing never changes control flow; the default callback drops
every event. ``structlog_logger`` adapts the callback to structlog so traces
land in the application's regular log stream.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

import structlog

TraceLogger = Callable[["TraceEvent"], Any]


@dataclass(frozen=True)
class TraceEvent:
    """
    One observation made by the engine.

    Attributes:
        type:    What is being evaluated ("property", "predicate-tuple",
                 "predicate-object", "predicate-function", "predicate-missing")
        stage:   "processing" before the step, "processed" after it
        message: Human-readable description of the step
        data:    Structured context (property name, value, verdict, ...)
    """

    type: str
    stage: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)


def noop_logger(event: TraceEvent) -> None:
    return None


def structlog_logger(name: str = "schemacheck", level: str = "debug") -> TraceLogger:
    """
    Build a trace callback that forwards events to a structlog logger.

    Args:
        name: Logger name passed to structlog.get_logger
        level: Log method used for every event (debug, info, ...)

    Returns:
        A callable suitable for the ``logger`` option
    """
    log = structlog.get_logger(name)

    def forward(event: TraceEvent) -> None:
        getattr(log, level)(
            event.message, event_type=event.type, stage=event.stage, data=event.data
        )

    return forward
