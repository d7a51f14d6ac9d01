"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Positions passed to the service are 0-based indexes into the listing the
user was shown: ``list_events()`` for events, ``confirmed_events()`` for
cancellations.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from events.domain import Attendee, Category, Event, EventStatus
from events.domain.errors import CorruptDataError, IndexOutOfRangeError, InvalidFieldError
from events.domain.value_objects import parse_start_time
from events.services.attendance import AttendanceLedger
from events.services.state import AppState
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "address", "category", "start_time", "description")


class EventService:
    """Service for registering events and managing attendance."""

    def __init__(
        self,
        store: EventStore,
        state: AppState | None = None,
        ledger: AttendanceLedger | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._state = state if state is not None else AppState()
        self._ledger = ledger if ledger is not None else AttendanceLedger()
        self._clock = clock

    @property
    def state(self) -> AppState:
        return self._state

    def load(self) -> None:
        """Replace the in-memory events with the stored ones.

        Corrupt data is logged and treated as an empty collection.
        """
        try:
            self._state.events = self._store.load()
        except CorruptDataError as exc:
            logger.warning("%s; starting with an empty event list", exc)
            self._state.events = []

    def save(self) -> None:
        """Write every event to the store.

        Raises:
            OSError: If the store cannot be written.
        """
        self._store.save(self._state.events)

    def sign_in(self, name: str, email: str, city: str) -> Attendee:
        """Make the session attendee, reusing a stored record with the same name and email."""
        for event in self._state.events:
            for attendee in event.attendees:
                if attendee.matches(name, email):
                    attendee.city = city
                    self._state.attendee = attendee
                    logger.info("Welcome back %s", attendee.email)
                    return attendee

        attendee = Attendee(name=name, email=email, city=city)
        self._state.attendee = attendee
        logger.info("Registered attendee %s", attendee.email)
        return attendee

    def list_events(self) -> list[Event]:
        """Return all events ordered by start_time ascending."""
        return sorted(self._state.events, key=lambda event: event.start_time)

    def get_event(self, index: int) -> Event:
        """Return the event at ``index`` of ``list_events()``.

        Raises:
            IndexOutOfRangeError: If there is no event at that position.
        """
        return _pick(self.list_events(), index)

    def add_event(
        self,
        name: str,
        address: str,
        category: Category | str,
        start_time: datetime | str,
        description: str,
    ) -> Event:
        """Register a new event.

        Raises:
            InvalidCategoryError: If ``category`` names no category.
            InvalidDateTimeError: If ``start_time`` is not dd/MM/yyyy HH:mm.
        """
        event = Event(
            name=name,
            address=address,
            category=_coerce("category", category),
            start_time=_coerce("start_time", start_time),
            description=description,
        )
        self._state.events.append(event)
        logger.info("Registered event %s (%s)", event.name, event.id)
        return event

    def update_event(self, index: int, field: str, value: object) -> Event:
        """Set one field of the event at ``index``.

        Raises:
            IndexOutOfRangeError: If there is no event at that position.
            InvalidFieldError: If ``field`` is not an editable field.
            InvalidCategoryError: If a new category names no category.
            InvalidDateTimeError: If a new start time is not dd/MM/yyyy HH:mm.
        """
        event = self.get_event(index)
        if field not in EDITABLE_FIELDS:
            raise InvalidFieldError(field)
        setattr(event, field, _coerce(field, value))
        logger.info("Updated %s of event %s", field, event.id)
        return event

    def remove_event(self, index: int) -> Event:
        """Delete the event at ``index`` and drop it from every attendee.

        Raises:
            IndexOutOfRangeError: If there is no event at that position.
        """
        event = self.get_event(index)
        self._state.events.remove(event)
        for attendee in list(event.attendees):
            self._ledger.detach(attendee, event)
        logger.info("Removed event %s (%s)", event.name, event.id)
        return event

    def status_of(self, event: Event) -> EventStatus:
        return event.status(self._clock())

    def confirmed_events(self, attendee: Attendee) -> list[Event]:
        return list(attendee.confirmed_events)

    def confirm_attendance(self, attendee: Attendee, index: int) -> Event:
        """Confirm ``attendee`` for the event at ``index`` of ``list_events()``."""
        event = self.get_event(index)
        self._ledger.confirm(attendee, event)
        return event

    def cancel_attendance(self, attendee: Attendee, index: int) -> Event:
        """Cancel ``attendee`` for the event at ``index`` of their confirmed events."""
        event = _pick(attendee.confirmed_events, index)
        self._ledger.cancel(attendee, event)
        return event


def _pick(items: list, index: int):
    if not 0 <= index < len(items):
        raise IndexOutOfRangeError(index, len(items))
    return items[index]


def _coerce(field: str, value: object) -> object:
    if field == "category":
        return value if isinstance(value, Category) else Category.parse(str(value))
    if field == "start_time":
        return value if isinstance(value, datetime) else parse_start_time(str(value))
    return str(value)
