"""File observer for error notifications.

Log files are opened in append mode for every line and closed right after.
No handle is held between notifications.
"""

import logging
from pathlib import Path
from typing import Union

from ..events import Severity
from .base import Observer

logger = logging.getLogger(__name__)


def append_line(path: Path, line: str) -> bool:
    """Append one line to a log file, creating it if needed.

    Failures to open or write the file are logged and swallowed.

    Args:
        path: Log file to append to
        line: Text to write, without trailing newline

    Returns:
        True if the line was written, False if the sink was unavailable
    """
    try:
        with open(path, 'a', encoding='utf-8') as f:
            f.write(line + '\n')
        return True
    except OSError as e:
        logger.warning(f"Failed to append to {path}: {e}")
        return False


class ErrorObserver(Observer):
    """Observer that appends errors to a log file.

    Attributes:
        file_path: Log file receiving "Error: <message>" lines
    """

    def __init__(self, file_path: Union[str, Path]) -> None:
        self.file_path = Path(file_path)

    def on_error(self, message: str) -> None:
        append_line(self.file_path, Severity.ERROR.format(message))
