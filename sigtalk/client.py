"""Client: sends a text message to a server process as a stream of signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Sequence

from .chars import atoi
from .protocol import BITS_PER_BYTE, encode_message

ARGUMENTS_ERROR = "Arguments Error"
PID_ERROR = "Pid Error"

DEFAULT_BIT_DELAY = 100e-6
DEFAULT_BYTE_DELAY = 200e-6


class ClientError(Exception):
    """A failure that ends the client with exit status 1."""


def parse_pid(text: str) -> int:
    """Read a process id from the leading integer of ``text``."""
    return atoi(text)


def check_pid(pid: int) -> None:
    """Raise ClientError unless a signal may be sent to ``pid``."""
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError) as exc:
        raise ClientError(PID_ERROR) from exc


def send_message(
    pid: int,
    message: str | bytes,
    bit_delay: float = DEFAULT_BIT_DELAY,
    byte_delay: float = DEFAULT_BYTE_DELAY,
) -> None:
    """Send ``message`` and a trailing newline to ``pid``, one signal per bit."""
    check_pid(pid)
    for index, bit in enumerate(encode_message(message), start=1):
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        time.sleep(bit_delay)
        if index % BITS_PER_BYTE == 0:
            time.sleep(byte_delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 2:
            raise ClientError(ARGUMENTS_ERROR)
        pid = parse_pid(args[0])
        send_message(pid, os.fsencode(args[1]))
    except ClientError as exc:
        sys.stdout.write(str(exc))
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())