from events.stores.file_store import FileEventStore
from events.stores.interfaces import EventStore

__all__ = ["EventStore", "FileEventStore"]
