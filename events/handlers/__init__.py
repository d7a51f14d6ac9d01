from events.handlers.shell import EventShell

__all__ = ["EventShell"]
