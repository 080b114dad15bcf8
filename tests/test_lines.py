import os

import pytest

from minitalk.lines import LineReader


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_in_order(make_fd):
    reader = LineReader(make_fd(b"one\ntwo\nthree\n"))
    assert reader.read_line() == b"one\n"
    assert reader.read_line() == b"two\n"
    assert reader.read_line() == b"three\n"
    assert reader.read_line() is None


def test_last_line_without_newline(make_fd):
    reader = LineReader(make_fd(b"alpha\nbeta"))
    assert list(reader) == [b"alpha\n", b"beta"]


def test_empty_input(make_fd):
    reader = LineReader(make_fd(b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_blank_lines_kept(make_fd):
    reader = LineReader(make_fd(b"\n\nx\n"))
    assert list(reader) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 10, 64, 10000])
def test_any_buffer_size_reassembles_input(make_fd, size):
    data = b"short\n" + b"a much longer line than the buffer\n" + b"\n" + b"tail"
    lines = list(LineReader(make_fd(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"hello\nworld\n")
        os.close(write_end)
        assert list(LineReader(read_end, 4)) == [b"hello\n", b"world\n"]
    finally:
        os.close(read_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -3])
def test_bad_buffer_size_rejected(make_fd, size):
    with pytest.raises(ValueError):
        LineReader(make_fd(b"x"), size)


def test_closed_fd_raises_oserror(make_fd):
    fd = make_fd(b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).read_line()