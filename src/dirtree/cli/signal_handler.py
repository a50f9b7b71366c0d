"""Signal handling utilities for dirtree CLI.

This module provides signal handlers for managing interruptions
and ensuring proper cleanup during command-line operation.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Handles system signals for graceful interruption management.

    SIGPIPE matters when the tree is written to stdout and the reader goes away
    (for example ``dirtree -o - | head``). SIGINT is recorded so the writer can
    stop and the process can exit with the conventional status.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Original SIGPIPE signal handler.
        original_sigint_handler: Original SIGINT signal handler.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    @property
    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if there were none.

        SIGPIPE takes precedence over SIGINT.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Cleanup function registered with atexit.

    Redirects stdout to the null device if we received SIGPIPE or SIGINT to prevent
    additional error messages during shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


# Register the cleanup function
atexit.register(cleanup)
