"""Fatal error observer reporting to both console and log file."""

from pathlib import Path
from typing import Optional, TextIO, Union

from ..events import Severity
from .base import Observer
from .console import write_console_line
from .file import append_line


class FatalErrorObserver(Observer):
    """Observer that prints fatal errors and appends them to a log file.

    The console line is written first and does not depend on the file
    append succeeding.

    Attributes:
        file_path: Log file receiving "Fatal: <message>" lines
        stream: Text stream to write to (stdout when None)
    """

    def __init__(self, file_path: Union[str, Path], stream: Optional[TextIO] = None) -> None:
        self.file_path = Path(file_path)
        self.stream = stream

    def on_fatal_error(self, message: str) -> None:
        line = Severity.FATAL.format(message)
        write_console_line(line, self.stream)
        append_line(self.file_path, line)
