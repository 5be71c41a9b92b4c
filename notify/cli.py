"""Command-line demo driver for the notifier."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from .observable import Observable
from .observers import ErrorObserver, FatalErrorObserver, WarningObserver

logger = logging.getLogger(__name__)

DEFAULT_ERROR_LOG = "errors.log"
DEFAULT_FATAL_LOG = "fatal_errors.log"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    By default, logging does not output to console.
    In verbose mode, DEBUG-level logs are shown on stderr.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        root_logger.addHandler(console_handler)

    root_logger.setLevel(logging.DEBUG)


def run_demo(
    error_log: Union[str, Path],
    fatal_log: Union[str, Path],
    stream: Optional[TextIO] = None,
) -> int:
    """Run the canonical observer scenario.

    Registers one observer per severity, reports one event on each channel,
    then removes the error observer and reports another error that must not
    reach the error log.

    Args:
        error_log: Log file for the ErrorObserver
        fatal_log: Log file for the FatalErrorObserver
        stream: Console stream for the observers (stdout when None)

    Returns:
        Always 0; unavailable log files are not reported as failures
    """
    observable = Observable()

    warning_observer = WarningObserver(stream)
    error_observer = ErrorObserver(error_log)
    fatal_error_observer = FatalErrorObserver(fatal_log, stream)

    observable.add_observer(warning_observer)
    observable.add_observer(error_observer)
    observable.add_observer(fatal_error_observer)

    observable.warning("This is a warning")
    observable.error("This is an error")
    observable.fatal_error("This is a fatal error")

    observable.remove_observer(error_observer)

    observable.error("This error is not recorded")

    observable.clear()
    logger.debug("Demo finished")
    return 0


def main() -> int:
    """Main entry point.

    Runs the demo with errors.log and fatal_errors.log in the working
    directory. Takes no arguments and always returns 0.
    """
    setup_logging()
    return run_demo(DEFAULT_ERROR_LOG, DEFAULT_FATAL_LOG)


if __name__ == "__main__":
    sys.exit(main())
