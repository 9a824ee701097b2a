"""Core runtime for a text user interface toolkit: styles, event loop, timeouts, thread primitives and text utilities."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "event_queue",
    "events",
    "formatting",
    "i18n",
    "mainloop",
    "slots",
    "style",
    "threads",
    "transcode",
]