from events.domain.models import Attendee, Event
from events.domain.value_objects import AttendeeId, Category, EventId, EventStatus

__all__ = [
    "Attendee",
    "Event",
    "AttendeeId",
    "EventId",
    "Category",
    "EventStatus",
]
