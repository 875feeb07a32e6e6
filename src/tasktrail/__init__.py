"""tasktrail - interactive task manager with undo."""

__version__ = "0.1.0"
