"""Server: prints its process id and writes out every byte it receives as signals."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import BinaryIO

from .protocol import Decoder

SIGNAL_ERROR = "Signal Error"
BANNER_PREFIX = "pid :"


class Server:
    """Receives bits as SIGUSR1 (0) and SIGUSR2 (1) and writes each completed byte."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self._decoder = Decoder()

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: take one bit and write the byte once eight have arrived."""
        if signum == signal.SIGUSR1:
            bit = 0
        elif signum == signal.SIGUSR2:
            bit = 1
        else:
            raise ValueError(f"unexpected signal: {signum}")
        byte = self._decoder.feed(bit)
        if byte is not None:
            self._write(bytes([byte]))

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to this server."""
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)

    def banner(self, pid: int) -> str:
        """Write and return the line announcing the process id."""
        line = f"{BANNER_PREFIX}{pid}\n"
        self._write(line.encode("ascii"))
        return line

    def run(self) -> None:
        """Announce this process, install the handlers and wait for signals forever."""
        self.banner(os.getpid())
        self.install()
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``server``. Runs until interrupted."""
    server = Server()
    try:
        server.run()
    except (OSError, ValueError):
        sys.stdout.write(SIGNAL_ERROR)
        sys.stdout.flush()
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())