"""Observers for the Observable notification hub.

This package provides the Observer base class and the concrete observers that
report notifications on the console or in log files.

Each concrete observer overrides only the handlers it cares about; the rest
stay no-ops inherited from Observer.
"""

from .base import Observer
from .console import WarningObserver
from .fatal import FatalErrorObserver
from .file import ErrorObserver, append_line

__all__ = [
    "Observer",
    "WarningObserver",
    "ErrorObserver",
    "FatalErrorObserver",
    "append_line",
]
