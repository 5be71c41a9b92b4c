"""Console observer for warning notifications."""

import sys
from typing import Optional, TextIO

from ..events import Severity
from .base import Observer


def write_console_line(line: str, stream: Optional[TextIO] = None) -> None:
    """Write one line to a stream, stdout when stream is None.

    stdout is looked up at call time so redirection after construction
    is honoured.
    """
    target = stream if stream is not None else sys.stdout
    target.write(line + "\n")
    target.flush()


class WarningObserver(Observer):
    """Observer that prints warnings to the console.

    Attributes:
        stream: Text stream to write to (stdout when None)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def on_warning(self, message: str) -> None:
        write_console_line(Severity.WARNING.format(message), self.stream)
