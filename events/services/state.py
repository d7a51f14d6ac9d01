from dataclasses import dataclass, field

from events.domain import Attendee, Event


@dataclass
class AppState:
    """Everything one console session works on.

    ``events`` is kept in registration order; listings sort a copy.
    """

    events: list[Event] = field(default_factory=list)
    attendee: Attendee | None = None
