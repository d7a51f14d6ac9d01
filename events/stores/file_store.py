"""JSON file implementation of the EventStore.

The whole collection is written as one document and read back in one go.
"""

import logging
from pathlib import Path
from uuid import UUID

from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer

from events.domain import Attendee, AttendeeId, Category, Event, EventId
from events.domain.errors import CorruptDataError
from events.stores.interfaces import EventStore
from events.stores.serializers import GRAPH_VERSION, EventGraphSerializer

logger = logging.getLogger(__name__)


class FileEventStore(EventStore):
    """Event store backed by a single JSON file on local disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Event]:
        if not self._path.exists():
            logger.info("No event file at %s, starting with an empty list", self._path)
            return []

        try:
            with self._path.open("rb") as stream:
                payload = JSONParser().parse(stream)
        except ParseError as exc:
            raise CorruptDataError(str(exc.detail)) from exc
        except OSError as exc:
            raise CorruptDataError(f"cannot read {self._path}: {exc}") from exc

        serializer = EventGraphSerializer(data=payload)
        if not serializer.is_valid():
            raise CorruptDataError(str(dict(serializer.errors)))

        events = self._build_graph(serializer.validated_data)
        logger.info("Loaded %d events from %s", len(events), self._path)
        return events

    def save(self, events: list[Event]) -> None:
        content = JSONRenderer().render(
            EventGraphSerializer(self._to_graph(events)).data,
            renderer_context={"indent": 2},
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("wb") as stream:
            stream.write(content)
        logger.info("Saved %d events to %s", len(events), self._path)

    def _to_graph(self, events: list[Event]) -> dict:
        saved_ids = {event.id for event in events}
        attendees: dict[AttendeeId, Attendee] = {}
        for event in events:
            for attendee in event.attendees:
                attendees.setdefault(attendee.id, attendee)

        return {
            "version": GRAPH_VERSION,
            "attendees": [
                {
                    "id": attendee.id.value,
                    "name": attendee.name,
                    "email": attendee.email,
                    "city": attendee.city,
                    "confirmed_event_ids": [
                        event.id.value
                        for event in attendee.confirmed_events
                        if event.id in saved_ids
                    ],
                }
                for attendee in attendees.values()
            ],
            "events": [
                {
                    "id": event.id.value,
                    "name": event.name,
                    "address": event.address,
                    "category": event.category.value,
                    "start_time": event.start_time,
                    "description": event.description,
                    "attendee_ids": [attendee.id.value for attendee in event.attendees],
                }
                for event in events
            ],
        }

    def _build_graph(self, data: dict) -> list[Event]:
        events: dict[UUID, Event] = {}
        for record in data["events"]:
            if record["id"] in events:
                raise CorruptDataError(f"duplicate event id {record['id']}")
            events[record["id"]] = Event(
                id=EventId(record["id"]),
                name=record["name"],
                address=record["address"],
                category=Category(record["category"]),
                start_time=record["start_time"],
                description=record["description"],
            )

        attendees: dict[UUID, Attendee] = {}
        for record in data["attendees"]:
            if record["id"] in attendees:
                raise CorruptDataError(f"duplicate attendee id {record['id']}")
            attendee = Attendee(
                id=AttendeeId(record["id"]),
                name=record["name"],
                email=record["email"],
                city=record["city"],
            )
            for event_id in record["confirmed_event_ids"]:
                event = _lookup(events, event_id, "event")
                if event not in attendee.confirmed_events:
                    attendee.confirmed_events.append(event)
            attendees[record["id"]] = attendee

        for record in data["events"]:
            event = events[record["id"]]
            for attendee_id in record["attendee_ids"]:
                attendee = _lookup(attendees, attendee_id, "attendee")
                if attendee not in event.attendees:
                    event.attendees.append(attendee)

        for event in events.values():
            for attendee in event.attendees:
                if event not in attendee.confirmed_events:
                    raise CorruptDataError(
                        f"event {event.id} lists attendee {attendee.id} "
                        "who did not confirm it"
                    )
        for attendee in attendees.values():
            for event in attendee.confirmed_events:
                if attendee not in event.attendees:
                    raise CorruptDataError(
                        f"attendee {attendee.id} confirmed event {event.id} "
                        "which does not list them"
                    )

        return list(events.values())


def _lookup(table: dict, key: UUID, kind: str):
    try:
        return table[key]
    except KeyError:
        raise CorruptDataError(f"unknown {kind} id {key}") from None
