"""Send a message to a server process, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable, Sequence

from minitalk.protocol import PID_MAX_LIMIT, PID_MIN, byte_bits

DEFAULT_DELAY = 0.0005
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

KillFunc = Callable[[int, int], None]


class ClientError(Exception):
    """Raised when arguments are invalid or a signal cannot be sent."""


def parse_pid(text: str) -> int:
    """Parse ``text`` as a process id and check it lies in the allowed range."""
    rest = text.lstrip(_WHITESPACE)
    negative = rest[:1] == "-"
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    digits = rest[: len(rest) - len(rest.lstrip(_DIGITS))]
    magnitude = int(digits) if digits else 0
    if magnitude > (_INT_MAX + 1 if negative else _INT_MAX):
        raise ClientError("Invalid PID range!")
    pid = -magnitude if negative else magnitude
    if not PID_MIN <= pid <= PID_MAX_LIMIT:
        raise ClientError("Invalid PID range!")
    return pid


def validate_args(args: Sequence[str]) -> tuple[str, str]:
    """Check the ``<pid> <message>`` arguments and return them as a pair."""
    if len(args) != 2 or not args[1]:
        raise ClientError("Invalid arguments! Usage: ./client <pid> <message>")
    pid_text, message = args
    digits = pid_text[1:] if pid_text.startswith("+") else pid_text
    if any(char not in _DIGITS for char in digits):
        raise ClientError("Invalid PID!")
    return pid_text, message


def send_byte(
    pid: int,
    byte: int,
    delay: float = DEFAULT_DELAY,
    kill: KillFunc | None = None,
) -> None:
    """Send one byte as eight signals: SIGUSR1 for a one, SIGUSR2 for a zero."""
    send = kill or os.kill
    for bit in byte_bits(byte):
        signum = signal.SIGUSR1 if bit else signal.SIGUSR2
        try:
            send(pid, signum)
        except OSError as exc:
            raise ClientError(f"Error sending {signal.Signals(signum).name}") from exc
        time.sleep(delay)


def send_message(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    kill: KillFunc | None = None,
) -> None:
    """Send every byte of ``message`` followed by a terminating zero byte."""
    data = message.encode("utf-8", "surrogateescape") if isinstance(message, str) else message
    for byte in (*data, 0):
        send_byte(pid, byte, delay, kill)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client <pid> <message>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pid_text, message = validate_args(args)
        pid = parse_pid(pid_text)
        send_message(pid, message)
    except ClientError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())