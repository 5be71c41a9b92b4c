"""Severity notifier built on the observer pattern.

An Observable fans warning, error and fatal notifications out to registered
observers, which report them on the console or append them to log files.
"""

import logging

from .events import Severity
from .observable import Observable
from .observers import (
    ErrorObserver,
    FatalErrorObserver,
    Observer,
    WarningObserver,
)

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Observable",
    "Observer",
    "Severity",
    "WarningObserver",
    "ErrorObserver",
    "FatalErrorObserver",
]
