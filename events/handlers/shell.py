"""Console handler - handles terminal concerns only.

The shell:
- Prompts for input and parses menu choices
- Calls the service for business logic
- Reports domain errors to the user and returns to the main menu
- Never contains business logic
"""

import logging
import sys
from typing import TextIO

from events.domain import Attendee, Category, Event, EventStatus
from events.domain.errors import DomainError, InvalidFieldError
from events.domain.value_objects import format_start_time, parse_start_time
from events.services.event_service import EventService

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "\n--- Event System ---\n"
    "1. List available events\n"
    "2. Register a new event\n"
    "3. See my confirmed events\n"
    "4. Edit an event\n"
    "5. Delete an event\n"
    "6. Exit"
)

EXIT_OPTION = 6

FIELD_MENU = {
    1: ("name", "New name: "),
    2: ("address", "New address: "),
    3: ("category", "New category: "),
    4: ("start_time", "New time (dd/MM/yyyy HH:mm): "),
    5: ("description", "New description: "),
}

STATUS_LABELS = {
    EventStatus.UPCOMING: "",
    EventStatus.ONGOING: " (HAPPENING NOW)",
    EventStatus.PAST: " (ALREADY HAPPENED)",
}


class EventShell:
    """Numbered-menu console over an EventService."""

    def __init__(
        self,
        service: EventService,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._service = service
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._actions = {
            1: self.list_events,
            2: self.register_event,
            3: self.my_events,
            4: self.edit_event,
            5: self.delete_event,
        }

    def run(self) -> None:
        """Load events, sign in, serve the menu until exit, then save."""
        self._service.load()
        try:
            attendee = self.sign_in()
            self._serve(attendee)
        except EOFError:
            self._say("")
        self._say("Saving events and exiting...")
        self._save()

    def sign_in(self) -> Attendee:
        self._say("\n--- Attendee Registration ---")
        name = self._ask("Enter your name: ")
        email = self._ask("Enter your email: ")
        city = self._ask("Enter your city: ")
        attendee = self._service.sign_in(name, email, city)
        self._say(f"Attendee {attendee.name} registered successfully!")
        return attendee

    def list_events(self, attendee: Attendee) -> None:
        self._say("\n--- Events in your city ---")
        events = self._service.list_events()
        if not events:
            self._say("No events registered yet.")
            return
        for position, event in enumerate(events, start=1):
            label = STATUS_LABELS[self._service.status_of(event)]
            self._say(f"{position}. {event.name} - {format_start_time(event.start_time)}{label}")

        index = self._ask_position("\nEnter an event number to see details or 0 to go back: ")
        if index is None:
            return
        event = self._service.get_event(index)
        self._say(self.describe(event))
        answer = self._ask("Confirm your attendance at this event? (y/n): ")
        if answer.strip().lower() == "y":
            self._service.confirm_attendance(attendee, index)
            self._say("Attendance confirmed!")

    def register_event(self, attendee: Attendee) -> None:
        self._say("\n--- New Event ---")
        name = self._ask("Event name: ")
        address = self._ask("Address: ")
        self._say(f"Available categories: {', '.join(Category.names())}")
        category = Category.parse(self._ask("Category: "))
        start_time = parse_start_time(self._ask("Time (dd/MM/yyyy HH:mm): "))
        description = self._ask("Description: ")
        self._service.add_event(name, address, category, start_time, description)
        self._say("Event registered successfully!")

    def my_events(self, attendee: Attendee) -> None:
        self._say("\n--- My Confirmed Events ---")
        events = self._service.confirmed_events(attendee)
        if not events:
            self._say("You have not confirmed attendance at any event yet.")
            return
        for position, event in enumerate(events, start=1):
            self._say(f"{position}. {event.name} - {format_start_time(event.start_time)}")

        index = self._ask_position("\nEnter an event number to cancel attendance or 0 to go back: ")
        if index is None:
            return
        self._service.cancel_attendance(attendee, index)
        self._say("Attendance cancelled.")

    def edit_event(self, attendee: Attendee) -> None:
        self._say("\n--- Edit Event ---")
        if not self._show_names("There are no events to edit."):
            return

        index = self._ask_position("\nEnter the number of the event to edit or 0 to go back: ")
        if index is None:
            return
        event = self._service.get_event(index)
        self._say(f"\nSelected event: {event.name}")
        self._say("Which field do you want to edit?")
        self._say("1. Name\n2. Address\n3. Category\n4. Time\n5. Description")
        raw = self._ask("Choose an option: ")
        option = _to_int(raw)
        if option not in FIELD_MENU:
            raise InvalidFieldError(raw.strip())
        field, prompt = FIELD_MENU[option]
        if field == "category":
            self._say(f"Available categories: {', '.join(Category.names())}")
        self._service.update_event(index, field, self._ask(prompt))
        self._say("Event updated successfully!")

    def delete_event(self, attendee: Attendee) -> None:
        self._say("\n--- Delete Event ---")
        if not self._show_names("There are no events to delete."):
            return

        index = self._ask_position("\nEnter the number of the event to delete or 0 to go back: ")
        if index is None:
            return
        event = self._service.remove_event(index)
        self._say(f"Event '{event.name}' deleted.")

    @staticmethod
    def describe(event: Event) -> str:
        return (
            f"Name: {event.name}\n"
            f"  Address: {event.address}\n"
            f"  Category: {event.category.name}\n"
            f"  Time: {event.start_time.strftime('%d/%m/%Y at %H:%M')}\n"
            f"  Description: {event.description}\n"
            f"  Attendees: {len(event.attendees)}\n"
        )

    def _serve(self, attendee: Attendee) -> None:
        while True:
            self._say(MAIN_MENU)
            option = _to_int(self._ask("Choose an option: "))
            if option == EXIT_OPTION:
                return
            action = self._actions.get(option)
            if action is None:
                self._say("Invalid option. Try again.")
                continue
            try:
                action(attendee)
            except DomainError as exc:
                logger.debug("Menu action failed: %s", exc)
                self._say(f"Error: {exc.message}")

    def _save(self) -> None:
        try:
            self._service.save()
        except OSError as exc:
            logger.error("Could not save events: %s", exc)
            self._say("Events could not be saved.")

    def _show_names(self, empty_message: str) -> bool:
        events = self._service.list_events()
        if not events:
            self._say(empty_message)
            return False
        for position, event in enumerate(events, start=1):
            self._say(f"{position}. {event.name}")
        return True

    def _ask_position(self, prompt: str) -> int | None:
        """Ask for a 1-based position; return it 0-based, or None for "go back"."""
        raw = self._ask(prompt)
        choice = _to_int(raw)
        if choice == 0:
            return None
        if choice is None:
            self._say("Invalid option.")
            return None
        return choice - 1

    def _ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _say(self, text: str) -> None:
        self._stdout.write(f"{text}\n")


def _to_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None
