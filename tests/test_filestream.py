import os

import pytest

from hedgegi.filestream import FileStream


def test_round_trip_values(tmp_path):
    path = tmp_path / "data.bin"
    with FileStream(path, "wb") as stream:
        stream.write("I", 42)
        stream.write("fff", 1.5, -2.0, 0.25)
        stream.write("H", 7)
    with FileStream(path, "rb") as stream:
        assert stream.read("I") == 42
        assert stream.read("fff") == (1.5, -2.0, 0.25)
        assert stream.read("H") == 7


def test_read_array(tmp_path):
    path = tmp_path / "arr.bin"
    with FileStream(path, "w") as stream:
        for value in (3, 1, 4, 1, 5):
            stream.write("i", value)
    with FileStream(path, "r") as stream:
        assert stream.read_array("i", 5) == [3, 1, 4, 1, 5]


def test_string_round_trip_and_alignment(tmp_path):
    path = tmp_path / "str.bin"
    with FileStream(path, "wb") as stream:
        stream.write_string("abc")
        assert stream.tell() % 4 == 0
        stream.write_string("hello")
        stream.write("I", 99)
    with FileStream(path, "rb") as stream:
        assert stream.read_string() == "abc"
        assert stream.tell() % 4 == 0
        assert stream.read_string() == "hello"
        assert stream.read("I") == 99


def test_align_leaves_aligned_position(tmp_path):
    path = tmp_path / "a.bin"
    with FileStream(path, "wb") as stream:
        stream.write("B", 1)
        stream.align(16)
        assert stream.tell() == 16
        stream.align(16)
        assert stream.tell() == 16


def test_seek_and_tell(tmp_path):
    path = tmp_path / "s.bin"
    with FileStream(path, "wb") as stream:
        stream.write("IIII", 10, 20, 30, 40)
    with FileStream(path, "rb") as stream:
        stream.seek(-4, os.SEEK_END)
        assert stream.read("I") == 40


def test_read_past_end_raises(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x01\x02")
    with FileStream(path, "rb") as stream:
        with pytest.raises(EOFError):
            stream.read("I")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileStream(tmp_path / "missing.bin", "rb")


def test_close_marks_closed(tmp_path):
    stream = FileStream(tmp_path / "c.bin", "wb")
    assert stream.is_open
    stream.close()
    assert not stream.is_open
    with pytest.raises(ValueError):
        stream.tell()