import os

import pytest

from treeshell.output import put_char, put_endl, put_nbr, put_str


class _Pipe:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self._write_open = True

    def close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def read_all(self):
        self.close_write()
        chunks = []
        while True:
            chunk = os.read(self.read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self):
        self.close_write()
        os.close(self.read_fd)


@pytest.fixture
def pipe():
    channel = _Pipe()
    yield channel
    channel.close()


def test_put_char_string(pipe):
    put_char("a", pipe.write_fd)
    assert pipe.read_all() == b"a"


def test_put_char_code(pipe):
    put_char(ord("Z"), pipe.write_fd)
    assert pipe.read_all() == b"Z"


def test_put_char_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char("ab", pipe.write_fd)


def test_put_str_writes_text(pipe):
    put_str("hello world", pipe.write_fd)
    assert pipe.read_all() == b"hello world"


def test_put_str_none_writes_nothing(pipe):
    put_str(None, pipe.write_fd)
    assert pipe.read_all() == b""


def test_put_endl_appends_newline(pipe):
    put_endl("line", pipe.write_fd)
    assert pipe.read_all() == "line".encode() + b"\n"


def test_put_endl_none_writes_nothing(pipe):
    put_endl(None, pipe.write_fd)
    assert pipe.read_all() == b""


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(pipe, n):
    put_nbr(n, pipe.write_fd)
    assert int(pipe.read_all()) == n


def test_put_nbr_minimum(pipe):
    put_nbr(-2147483648, pipe.write_fd)
    assert pipe.read_all() == b"-2147483648"


def test_put_nbr_out_of_range(pipe):
    with pytest.raises(OverflowError):
        put_nbr(2**31, pipe.write_fd)


def test_put_str_to_file(tmp_path):
    path = tmp_path / "out.txt"
    with open(path, "wb") as handle:
        put_str("abc", handle.fileno())
        put_nbr(-5, handle.fileno())
    assert path.read_bytes() == b"abc" + b"-5"