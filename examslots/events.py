"""Optional trace of what the engine did, in the order it did it.

Callers pass an ``EventLog`` into the parsing, graph and coloring steps to
capture narration (degree ranking, per-course slot decisions). Every event is
also written to this module's logger at DEBUG level, so leaving the log out
only loses the structured copy.
"""
import logging
from typing import Iterator, List, Optional

from .models import TraceEvent

logger = logging.getLogger(__name__)


class EventLog:
    def __init__(self):
        self._events: List[TraceEvent] = []

    def emit(self, phase: str, course: Optional[str], detail: str) -> None:
        self._events.append(TraceEvent(phase=phase, course=course, detail=detail))
        logger.debug("[%s] %s: %s", phase, course or '-', detail)

    def phase(self, name: str) -> List[TraceEvent]:
        return [e for e in self._events if e.phase == name]

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def to_list(self) -> List[TraceEvent]:
        return list(self._events)


def emit(events: Optional[EventLog], phase: str, course: Optional[str], detail: str) -> None:
    """Record on ``events`` if given, otherwise just log."""
    if events is not None:
        events.emit(phase, course, detail)
    else:
        logger.debug("[%s] %s: %s", phase, course or '-', detail)
