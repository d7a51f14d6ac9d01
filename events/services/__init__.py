from events.services.attendance import AttendanceLedger
from events.services.event_service import EventService
from events.services.state import AppState

__all__ = ["AppState", "AttendanceLedger", "EventService"]
