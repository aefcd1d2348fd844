"""Operator-visible event sinks."""

import logging
from abc import ABC, abstractmethod
from typing import List

from .models import EventKind, OperatorEvent


class EventSink(ABC):
    """Receives per-artifact events from the execution engine."""

    @abstractmethod
    def report(self, event: OperatorEvent) -> None:
        """Handle one event."""


class LoggingEventSink(EventSink):
    """Writes events to the application log."""

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)

    def report(self, event: OperatorEvent) -> None:
        if event.kind.is_failure:
            self.logger.error(f"{event.message}: {event.name} ({event.error})")
        else:
            self.logger.info(f"{event.message}: {event.name}")


class RecordingEventSink(EventSink):
    """Keeps every event in memory."""

    def __init__(self):
        self.events: List[OperatorEvent] = []

    def report(self, event: OperatorEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> List[OperatorEvent]:
        return [e for e in self.events if e.kind is kind]

    @property
    def failures(self) -> List[OperatorEvent]:
        return [e for e in self.events if e.kind.is_failure]
