"""The sending side: push a message to the server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from minitalk.bits import byte_bits, message_bytes
from minitalk.errors import (
    CYAN,
    ERROR_HEADER,
    GREEN,
    RED,
    RESET,
    ErrorKind,
    MinitalkError,
    check,
    error_message,
)
from minitalk.numbers import atoi
from minitalk.printf import print_formatted

DEFAULT_TIMEOUT = 5.0
DEFAULT_POLL_INTERVAL = 0.0001
NOTICE_AFTER = 3.0
CONFIRMATION = "Message Recieved By Server."


class Sender:
    """Send bytes to a server process, waiting for each bit to be acknowledged.

    A 1 bit is sent as SIGUSR1 and a 0 bit as SIGUSR2. The server answers
    every bit with SIGUSR1 and the end of a message with SIGUSR2.
    """

    def __init__(
        self,
        pid: int,
        timeout: float = DEFAULT_TIMEOUT,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        if poll_interval <= 0:
            raise ValueError("poll interval must be positive")
        self.pid = pid
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._acknowledged = False
        try:
            signal.signal(signal.SIGUSR1, self._on_signal)
            signal.signal(signal.SIGUSR2, self._on_signal)
        except (OSError, ValueError) as exc:
            raise MinitalkError(ErrorKind.SIG) from exc

    def _on_signal(self, signum: int, frame: object) -> None:
        if signum == signal.SIGUSR1:
            self._acknowledged = True
        elif signum == signal.SIGUSR2:
            sys.stderr.write(f"{GREEN}{CONFIRMATION}\n{RESET}")
            sys.stderr.flush()

    def _await_acknowledgement(self) -> None:
        start = time.monotonic()
        while not self._acknowledged:
            time.sleep(self.poll_interval)
            elapsed = time.monotonic() - start
            if elapsed > NOTICE_AFTER:
                print_formatted(RED + "\rWaiting: %d Seconds" + RESET, int(elapsed))
                sys.stdout.flush()
            if elapsed >= self.timeout:
                sys.stdout.write("\n")
                sys.stdout.flush()
                raise MinitalkError(ErrorKind.TIMEOUT)

    def send_byte(self, byte: int) -> None:
        """Send one byte, most significant bit first."""
        for bit in byte_bits(byte):
            self._acknowledged = False
            os.kill(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
            self._await_acknowledgement()

    def send(self, message: Union[str, bytes]) -> None:
        """Send a whole message followed by its NUL terminator."""
        for byte in message_bytes(message):
            self.send_byte(byte)


def _report_error(kind: ErrorKind) -> None:
    sys.stderr.write(f"{RED}{ERROR_HEADER}\n{RESET}{CYAN}{error_message(kind)}\n{RESET}")
    sys.stderr.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send argv's message to the server with argv's PID; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 2:
            raise MinitalkError(ErrorKind.ARG)
        pid_text, message = args
        pid = atoi(pid_text)
        check(pid, pid_text)
        Sender(pid).send(os.fsencode(message))
    except MinitalkError as exc:
        _report_error(exc.kind)
        return 1
    return 0