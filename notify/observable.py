"""Observable notification hub.

This module provides a simple synchronous fan-out dispatcher. Observers are
registered on an Observable and receive every warning, error and fatal
notification it reports, in registration order.

The hub does not own its observers: callers keep them alive and remove them
when they are done. Handler exceptions are caught and logged so that one
failing observer cannot stop the others from being notified.
"""

import logging
from typing import List, Optional, Tuple

from .events import Severity
from .observers.base import Observer

logger = logging.getLogger(__name__)


class Observable:
    """Synchronous notification source with three severity channels.

    Maintains an ordered list of observer references. Duplicates are allowed;
    an observer registered twice is notified twice per event.

    Each notification iterates over a snapshot of the registry taken when the
    notification starts. Observers added or removed from inside a handler take
    effect from the next notification on.

    Example usage:
        observable = Observable()
        observable.add_observer(WarningObserver())
        observable.warning("disk almost full")
    """

    def __init__(self) -> None:
        """Initialize an Observable with an empty registry."""
        self._observers: List[Optional[Observer]] = []

    def add_observer(self, observer: Optional[Observer]) -> None:
        """Register an observer.

        No uniqueness check is made; registering the same observer again
        appends another reference.

        Args:
            observer: Observer to notify on subsequent events
        """
        self._observers.append(observer)
        logger.debug(f"Registered {type(observer).__name__} ({len(self._observers)} total)")

    def remove_observer(self, observer: Optional[Observer]) -> None:
        """Remove every registration of an observer.

        Matching is by identity. If the observer is not registered, this is
        a no-op.

        Args:
            observer: The observer to remove
        """
        before = len(self._observers)
        self._observers = [o for o in self._observers if o is not observer]
        removed = before - len(self._observers)
        if removed:
            logger.debug(f"Removed {removed} registration(s) of {type(observer).__name__}")

    @property
    def observers(self) -> Tuple[Optional[Observer], ...]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    def has_observers(self) -> bool:
        """Check if any observer is registered."""
        return bool(self._observers)

    def clear(self) -> None:
        """Remove all registrations without notifying anyone."""
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def warning(self, message: str) -> None:
        """Report a warning to every registered observer."""
        self._notify(Severity.WARNING, message)

    def error(self, message: str) -> None:
        """Report an error to every registered observer."""
        self._notify(Severity.ERROR, message)

    def fatal_error(self, message: str) -> None:
        """Report a fatal error to every registered observer."""
        self._notify(Severity.FATAL, message)

    def _notify(self, severity: Severity, message: str) -> None:
        """Dispatch a message to the severity's handler on each observer.

        None entries are skipped. Handler exceptions are logged but not
        propagated.

        Args:
            severity: Channel being reported
            message: Message text passed to each handler
        """
        for observer in tuple(self._observers):
            if observer is None:
                continue

            try:
                getattr(observer, severity.handler)(message)
            except Exception as e:
                # Log the error but don't propagate - remaining observers must still run
                logger.error(
                    f"{type(observer).__name__}.{severity.handler} raised exception: {e}",
                    exc_info=True
                )
