"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

from events.domain.errors import InvalidCategoryError, InvalidDateTimeError

DATETIME_FORMAT = "%d/%m/%Y %H:%M"


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AttendeeId:
    """Unique identifier for an Attendee."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class Category(Enum):
    """Kinds of event that can be registered."""

    PARTY = "PARTY"
    SHOW = "SHOW"
    SPORTS = "SPORTS"
    CULTURAL = "CULTURAL"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, text: str) -> Self:
        """Return the category named by ``text``, ignoring case.

        Raises:
            InvalidCategoryError: If no category has that name.
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise InvalidCategoryError(text) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]


class EventStatus(Enum):
    """Time status of an event relative to the current moment."""

    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    PAST = "PAST"


def parse_start_time(text: str) -> datetime:
    """Parse a ``dd/MM/yyyy HH:mm`` string into a naive datetime.

    Raises:
        InvalidDateTimeError: If the text does not match the format.
    """
    try:
        return datetime.strptime(text.strip(), DATETIME_FORMAT)
    except ValueError:
        raise InvalidDateTimeError(text) from None


def format_start_time(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)
