"""Per-load diagnostics sink.

Recoverable decoding events (record drift, overrides, unknown tags...) are
recorded as structured events so callers and tests can inspect them, and are
forwarded to the standard logging module at the same time.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Kinds of recoverable events raised while decoding."""
    RECORD_DRIFT = auto()
    CATALOG_OVERRIDE = auto()
    UNKNOWN_THING = auto()
    UNKNOWN_TRIGGER = auto()
    UNKNOWN_TRIGGER_TYPE = auto()
    NON_ZERO_PADDING = auto()
    HEADER_MISMATCH = auto()
    NO_READER = auto()
    TRIGGER_ID_COLLISION = auto()
    INVALID_TIMESTAMP = auto()
    UNKNOWN_ART_RESOURCE_TYPE = auto()


@dataclass(frozen=True)
class DiagnosticEvent:
    """Single recorded event."""
    kind: DiagnosticKind
    message: str
    file: Optional[str] = None
    offset: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.name,
            'message': self.message,
            'file': self.file,
            'offset': self.offset,
            'data': dict(self.data),
        }


class Diagnostics:
    """Collects events for one load operation.

    Args:
        callback: Optional callable invoked with every new event
        level: Logging level used when forwarding events
    """

    def __init__(
        self,
        callback: Optional[Callable[[DiagnosticEvent], None]] = None,
        level: int = logging.WARNING
    ):
        self.callback = callback
        self.level = level
        self.current_file: Optional[str] = None
        self._events: List[DiagnosticEvent] = []

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        /,
        offset: Optional[int] = None,
        **data: Any
    ) -> DiagnosticEvent:
        """Record an event and log it."""
        event = DiagnosticEvent(
            kind=kind,
            message=message,
            file=self.current_file,
            offset=offset,
            data=data
        )
        self._events.append(event)
        where = f" ({self.current_file})" if self.current_file else ""
        logger.log(self.level, f"{message}{where}")
        if self.callback is not None:
            self.callback(event)
        return event

    def events_of(self, kind: DiagnosticKind) -> List[DiagnosticEvent]:
        return [e for e in self._events if e.kind is kind]

    def count(self, kind: DiagnosticKind) -> int:
        return len(self.events_of(kind))

    def summary(self) -> Dict[str, int]:
        """Event counts by kind name, only kinds that occurred."""
        counts: Dict[str, int] = {}
        for event in self._events:
            counts[event.kind.name] = counts.get(event.kind.name, 0) + 1
        return counts

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[DiagnosticEvent]:
        return iter(list(self._events))
