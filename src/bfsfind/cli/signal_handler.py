"""Signal handling for the bfsfind CLI.

Most entries a search visits produce no output, so an interruption cannot wait for the
next write to be noticed. The handlers here only record which signal arrived; the
traversal engine polls ``stop_requested`` before visiting each entry, SafeWriter refuses
to write once a signal has arrived, and main() turns the recorded signal into an exit
code. A second Ctrl+C goes to the original handler and raises KeyboardInterrupt, which
main() also maps to exit status 130.
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
    """Records SIGPIPE and SIGINT so a running search can stop at the next entry.

    Attributes:
        sigpipe_received: Event set when a SIGPIPE signal is received.
        sigint_received: Event set when a SIGINT signal is received.
        original_sigpipe_handler: SIGPIPE handler in place before setup.
        original_sigint_handler: SIGINT handler in place before setup.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def stop_requested(self) -> bool:
        """Polled by the traversal engine before each entry it visits."""
        return self.interrupted

    def reset(self) -> None:
        """Forget signals recorded by an earlier run."""
        self.sigpipe_received.clear()
        self.sigint_received.clear()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        # A second Ctrl+C falls through to the original handler
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def exit_code(self) -> Optional[int]:
        """Return the conventional exit status for a received signal, if any."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Clear earlier signals and install the SIGPIPE and SIGINT handlers."""
    signal_handler.reset()
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Keeps the interpreter from reporting a second broken pipe when it flushes stdout
    during shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
