import os

import pytest

from minitalk.errors import (
    ErrorKind,
    MinitalkError,
    check,
    check_pid_exists,
    error_message,
    validate_pid,
)

# Above the largest pid_max Linux allows, so no process can have it.
MISSING_PID = 4194305


def test_usage_message():
    assert error_message(ErrorKind.ARG) == "Usage: ./client <PID> <MESSAGE>"


def test_timeout_message():
    assert error_message(ErrorKind.TIMEOUT) == "TIMEOUT - Server Didn't Respond"


def test_every_kind_has_distinct_message():
    messages = {error_message(kind) for kind in ErrorKind}
    assert len(messages) == len(ErrorKind)


def test_error_carries_kind_and_message():
    err = MinitalkError(ErrorKind.NOPID)
    assert err.kind is ErrorKind.NOPID
    assert str(err) == "PID Does Not Exist"


@pytest.mark.parametrize("text", ["12a", "-5", " 1", "+7", "1.0", "abc"])
def test_validate_pid_rejects_non_digits(text):
    with pytest.raises(MinitalkError) as info:
        validate_pid(text)
    assert info.value.kind is ErrorKind.PID


def test_validate_pid_rejects_unicode_digits():
    with pytest.raises(MinitalkError) as info:
        validate_pid("\u0663")
    assert info.value.kind is ErrorKind.PID


def test_check_pid_exists_missing_process():
    with pytest.raises(MinitalkError) as info:
        check_pid_exists(MISSING_PID)
    assert info.value.kind is ErrorKind.NOPID


def test_check_returns_own_pid():
    pid = os.getpid()
    assert check(pid, str(pid)) == pid


def test_check_validates_text_before_existence():
    with pytest.raises(MinitalkError) as info:
        check(MISSING_PID, "x1")
    assert info.value.kind is ErrorKind.PID


def test_check_reports_missing_process():
    with pytest.raises(MinitalkError) as info:
        check(MISSING_PID, str(MISSING_PID))
    assert info.value.kind is ErrorKind.NOPID