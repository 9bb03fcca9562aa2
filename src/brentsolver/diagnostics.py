"""Diagnostic sinks for solver trace events.

The solver never talks to a logger directly. It emits events through a
sink passed in at construction:

    sink.log_event(level, message, params)

``level`` is a :mod:`logging` level, ``message`` a %-style format string
with named placeholders filled from ``params``, and ``params["event"]``
names the kind of event:

    solve.start, solve.initial, bracket.start, bracket.step,
    iteration, solve.finish, solve.error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol

LOGGER_NAME = "brentsolver"


class DiagnosticSink(Protocol):
    """Anything that accepts solver trace events."""

    def log_event(self, level: int, message: str, params: Mapping[str, Any]) -> None:
        ...


class LoggingSink:
    """Forwards events to a stdlib logger (``brentsolver`` by default)."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def log_event(self, level: int, message: str, params: Mapping[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        # A single mapping argument feeds %(name)s placeholders.
        self.logger.log(level, message, dict(params))


@dataclass
class InMemorySink:
    """Keeps every event in memory; handy for tests and post-mortems."""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log_event(self, level: int, message: str, params: Mapping[str, Any]) -> None:
        self.events.append(
            {
                "level": level,
                "event": params.get("event"),
                "message": message % dict(params),
                "params": dict(params),
            }
        )

    def filter_by_event(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] == event]

    def clear(self) -> None:
        self.events.clear()


class NullSink:
    """Discards everything."""

    def log_event(self, level: int, message: str, params: Mapping[str, Any]) -> None:
        pass
