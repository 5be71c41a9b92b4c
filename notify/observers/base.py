"""Base class for notification observers."""


class Observer:
    """Receives notifications from an Observable.

    All three handlers are no-ops. Subclasses override the ones they want to
    react to. Handlers return nothing and are not expected to signal failure
    back to the Observable.
    """

    def on_warning(self, message: str) -> None:
        """Handle a warning notification."""

    def on_error(self, message: str) -> None:
        """Handle an error notification."""

    def on_fatal_error(self, message: str) -> None:
        """Handle a fatal error notification."""
