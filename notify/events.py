"""Severity channels carried by the Observable.

Each severity names the label written in front of a message and the
Observer handler that receives it.
"""

from enum import Enum


class Severity(Enum):
    """The three notification channels.

    Attributes:
        label: Prefix written before the message ("Warning: ...")
        handler: Name of the Observer method invoked for this channel
    """

    WARNING = ("Warning", "on_warning")
    ERROR = ("Error", "on_error")
    FATAL = ("Fatal", "on_fatal_error")

    def __init__(self, label: str, handler: str) -> None:
        self.label = label
        self.handler = handler

    def format(self, message: str) -> str:
        """Return the report line for a message, without trailing newline."""
        return f"{self.label}: {message}"
