"""Attendance ledger - keeps both sides of an attendance link in step."""

import logging

from events.domain import Attendee, Event

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Confirms and cancels attendance between attendees and events.

    Every call leaves the link symmetric: the event is in
    ``attendee.confirmed_events`` exactly when the attendee is in
    ``event.attendees``. Calls on links that already hold (or are already
    absent) change nothing.
    """

    def confirm(self, attendee: Attendee, event: Event) -> None:
        if event not in attendee.confirmed_events:
            attendee.confirmed_events.append(event)
        if attendee not in event.attendees:
            event.attendees.append(attendee)
        logger.debug("Attendee %s confirmed for event %s", attendee.id, event.id)

    def cancel(self, attendee: Attendee, event: Event) -> None:
        if event in attendee.confirmed_events:
            attendee.confirmed_events.remove(event)
        if attendee in event.attendees:
            event.attendees.remove(attendee)
        logger.debug("Attendee %s cancelled for event %s", attendee.id, event.id)

    def detach(self, attendee: Attendee, event: Event) -> None:
        """Drop the link while ``event`` is being deleted."""
        self.cancel(attendee, event)

    def is_confirmed(self, attendee: Attendee, event: Event) -> bool:
        return event in attendee.confirmed_events
