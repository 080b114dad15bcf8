"""The receiving side: rebuild bytes from signals and acknowledge each bit."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from minitalk.bits import BitAssembler
from minitalk.errors import CYAN, ERROR_HEADER, RED, RESET, ErrorKind, MinitalkError, error_message
from minitalk.printf import print_formatted

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Receiver:
    """Turn incoming signals into bytes written to an output stream.

    SIGUSR1 carries a 1 bit and any other signal a 0 bit. Every signal is
    acknowledged to its sender with SIGUSR1; a complete NUL byte is first
    announced with SIGUSR2.
    """

    def __init__(self, output: BinaryIO) -> None:
        self.output = output
        self._assembler = BitAssembler()

    def receive(self, signum: int, sender: int) -> Optional[int]:
        """Take one bit-carrying signal; return the byte it completed, if any."""
        byte = self._assembler.push(1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            if byte == 0:
                os.kill(sender, signal.SIGUSR2)
            self.output.write(bytes((byte,)))
            self.output.flush()
        os.kill(sender, signal.SIGUSR1)
        return byte


def serve(output: BinaryIO) -> None:
    """Print this process's PID, then receive messages into output forever."""
    if not hasattr(signal, "sigwaitinfo"):
        raise MinitalkError(ErrorKind.SIG)
    try:
        signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    except (OSError, ValueError) as exc:
        raise MinitalkError(ErrorKind.SIG) from exc
    print_formatted("Server PID: %d\n", os.getpid(), stream=sys.stdout)
    sys.stdout.flush()
    receiver = Receiver(output)
    while True:
        info = signal.sigwaitinfo(_SIGNALS)
        receiver.receive(info.si_signo, info.si_pid)


def _report_error(kind: ErrorKind) -> None:
    sys.stderr.write(f"{RED}{ERROR_HEADER}\n{RESET}{CYAN}{error_message(kind)}\n{RESET}")
    sys.stderr.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server on standard output; return the exit status."""
    try:
        serve(sys.stdout.buffer)
    except MinitalkError as exc:
        _report_error(exc.kind)
        return 1
    return 0