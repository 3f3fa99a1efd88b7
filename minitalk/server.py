"""Receive messages sent as SIGUSR1/SIGUSR2 bit streams and print them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from typing import BinaryIO

from minitalk.ftprintf import printf
from minitalk.protocol import BitDecoder

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


def banner() -> str:
    """Return the start-up banner."""
    return (
        "\n\n"
        "███╗   ███╗██╗███╗   ██╗██╗████████╗ █████╗ ██╗     ██╗  ██╗\n"
        "████╗ ████║██║████╗  ██║██║╚══██╔══╝██╔══██╗██║     ██║ ██╔╝\n"
        "██╔████╔██║██║██╔██╗ ██║██║   ██║   ███████║██║     █████╔╝ \n"
        "██║╚██╔╝██║██║██║╚██╗██║██║   ██║   ██╔══██║██║     ██╔═██╗ \n"
        "██║ ╚═╝ ██║██║██║ ╚████║██║   ██║   ██║  ██║███████╗██║  ██╗\n"
        "╚═╝     ╚═╝╚═╝╚═╝  ╚═══╝╚═╝   ╚═╝   ╚═╝  ╚═╝╚══════╝╚═╝  ╚═╝\n\n"
        "\t\t\t   1 3 3 7\n\n"
    )


class Server:
    """Turns incoming signals into bytes written to ``output``."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender: int) -> int | None:
        """Record one signal from ``sender``; write and return a completed byte."""
        byte = self._decoder.feed(sender, signum == signal.SIGUSR1)
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()
        return byte

    def serve(self) -> None:
        """Wait for signals forever, handing each to :meth:`handle`."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the banner and pid, then serve."""
    args = sys.argv[1:] if argv is None else list(argv)
    printf(banner())
    if args:
        sys.stdout.flush()
        return 1
    printf("PID : %d \n", os.getpid())
    printf("Le programme est en pause, attendez un signal...\n")
    sys.stdout.flush()
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())