import logging
import sys
import typing as t

from django.conf import settings
from django.core.management.base import BaseCommand

from events.handlers import EventShell
from events.services import EventService
from events.stores import FileEventStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Run the interactive event attendance console.

    Events are loaded from the data file at startup and written back when
    the user exits or input ends.
    """

    help = "Run the interactive event attendance console."
    stealth_options = ("stdin",)

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--data-file",
            default=None,
            help="File to load events from and save them to (default: EVENTS_DATA_FILE).",
        )

    def handle(self, *args: t.Any, **options: t.Any) -> None:
        path = options["data_file"] or settings.EVENTS_DATA_FILE
        logger.debug("Using event file %s", path)
        shell = EventShell(
            EventService(FileEventStore(path)),
            stdin=options.get("stdin") or sys.stdin,
            stdout=options.get("stdout") or sys.stdout,
        )
        shell.run()
