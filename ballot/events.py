"""Notifications emitted by ballot operations."""

from dataclasses import asdict, dataclass
from typing import Any, Callable

from ballot.logger import get_logger
from ballot.models import Phase


@dataclass(frozen=True)
class Event:
    """Base class for notifications. Subclasses set ``name``."""

    name = "Event"

    def to_dict(self) -> dict[str, Any]:
        data = {
            key: value.name if isinstance(value, Phase) else value
            for key, value in asdict(self).items()
        }
        return {"event": self.name, **data}


@dataclass(frozen=True)
class VoterRegistered(Event):
    voter: str

    name = "VoterRegistered"


@dataclass(frozen=True)
class WorkflowStatusChange(Event):
    previous: Phase
    new: Phase

    name = "WorkflowStatusChange"


@dataclass(frozen=True)
class ProposalRegistered(Event):
    proposal_id: int

    name = "ProposalRegistered"


@dataclass(frozen=True)
class Voted(Event):
    voter: str
    proposal_id: int

    name = "Voted"


@dataclass(frozen=True)
class OwnershipTransferred(Event):
    previous: str
    new: str

    name = "OwnershipTransferred"


Subscriber = Callable[[Event], None]


class EventLog:
    """Ordered record of every notification emitted by a session.

    Events are appended, logged and then handed to each subscriber, in the
    order they are emitted. A subscriber that raises propagates the error to
    the operation that emitted the event.

    The log keeps every event for the lifetime of its session, the same
    lifetime as the rest of the session state, and is never truncated.
    """

    def __init__(self, logger=None):
        self._events: list[Event] = []
        self._subscribers: list[Subscriber] = []
        self._logger = logger or get_logger("events")

    def subscribe(self, callback: Subscriber) -> Subscriber:
        """Register a callback for future events. Usable as a decorator."""
        self._subscribers.append(callback)
        return callback

    def emit(self, event: Event) -> None:
        self._events.append(event)
        self._logger.info("%s %s", event.name, event.to_dict())
        for callback in self._subscribers:
            callback(event)

    def of_type(self, event_type: type[Event]) -> list[Event]:
        return [e for e in self._events if isinstance(e, event_type)]

    def __iter__(self):
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
