"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event


class EventStore(ABC):
    """Interface for persisting the whole event collection at once."""

    @abstractmethod
    def load(self) -> list[Event]:
        """Return every stored event in stored order, or [] if nothing is stored.

        Raises:
            CorruptDataError: If stored data exists but cannot be read back.
        """
        ...

    @abstractmethod
    def save(self, events: list[Event]) -> None:
        """Replace stored data with ``events`` and the attendees they reference.

        Raises:
            OSError: If the data cannot be written.
        """
        ...
