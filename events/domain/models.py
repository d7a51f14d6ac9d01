"""Domain models for events and the people attending them.

These are plain in-memory objects. Identity is carried by the synthetic
``id`` field, so editing any other field never changes which record an
object refers to. Attendance links are held on both sides and are only
mutated through ``events.services.attendance.AttendanceLedger``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from events.domain.value_objects import AttendeeId, Category, EventId, EventStatus

ONGOING_WINDOW = timedelta(hours=2)


@dataclass(eq=False)
class Attendee:
    """Domain representation of a person confirming attendance."""

    name: str
    email: str
    city: str
    id: AttendeeId = field(default_factory=AttendeeId.new)
    confirmed_events: list["Event"] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attendee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Name: {self.name}, Email: {self.email}"

    def matches(self, name: str, email: str) -> bool:
        return self.name == name and self.email == email


@dataclass(eq=False)
class Event:
    """Domain representation of an Event."""

    name: str
    address: str
    category: Category
    start_time: datetime
    description: str
    id: EventId = field(default_factory=EventId.new)
    attendees: list[Attendee] = field(default_factory=list, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def end_of_window(self) -> datetime:
        return self.start_time + ONGOING_WINDOW

    def status(self, now: datetime) -> EventStatus:
        """Classify the event relative to ``now``.

        An event counts as ongoing for two hours from its start time.
        """
        if now < self.start_time:
            return EventStatus.UPCOMING
        if now < self.end_of_window:
            return EventStatus.ONGOING
        return EventStatus.PAST
