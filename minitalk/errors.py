"""Error kinds, their messages and the checks applied to a server PID."""

from __future__ import annotations

import enum
import os

GREEN = "\033[0;32m"
CYAN = "\033[0;36m"
RED = "\033[0;31m"
RESET = "\033[0m"

ERROR_HEADER = "ERROR! "


class ErrorKind(enum.Enum):
    """The ways a client or server run can fail."""

    ARG = enum.auto()
    SIG = enum.auto()
    PID = enum.auto()
    NOPID = enum.auto()
    TIMEOUT = enum.auto()
    EMPTYSET = enum.auto()


_MESSAGES = {
    ErrorKind.ARG: "Usage: ./client <PID> <MESSAGE>",
    ErrorKind.SIG: "Error Setting Up Signal Handler",
    ErrorKind.PID: "Invalid PID - Contains Invalid Characters",
    ErrorKind.NOPID: "PID Does Not Exist",
    ErrorKind.TIMEOUT: "TIMEOUT - Server Didn't Respond",
    ErrorKind.EMPTYSET: "Error Empty Set",
}


def error_message(kind: ErrorKind) -> str:
    """Return the human-readable message for an error kind."""
    return _MESSAGES[kind]


class MinitalkError(Exception):
    """Raised when the client or server cannot go on."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        super().__init__(error_message(kind))


def validate_pid(text: str) -> None:
    """Raise MinitalkError(PID) unless every character of text is an ASCII digit."""
    if any(not "0" <= ch <= "9" for ch in text):
        raise MinitalkError(ErrorKind.PID)


def check_pid_exists(pid: int) -> None:
    """Raise MinitalkError(NOPID) if no process with this PID exists."""
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        raise MinitalkError(ErrorKind.NOPID) from None
    except OSError:
        # Any other failure (e.g. no permission) does not prove the PID is gone.
        return


def check(pid: int, text: str) -> int:
    """Validate the PID text, then make sure the process exists; return pid."""
    validate_pid(text)
    check_pid_exists(pid)
    return pid