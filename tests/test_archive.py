import struct

import pytest

from hedgegi.archive import (
    Archive,
    ArchiveEntry,
    load_archive,
    parse_archive,
    save_archive,
    split_archive_paths,
)


def _sample():
    archive = Archive()
    archive.add_or_replace("a.dds", b"first")
    archive.add_or_replace("longer_name.lft", b"\x00\x01\x02" * 11)
    archive.add_or_replace("empty.bin", b"")
    return archive


def test_header_bytes():
    data = save_archive(Archive())
    assert data == struct.pack("<4I", 0, 16, 20, 16)


def test_round_trip():
    archive = _sample()
    parsed = parse_archive(save_archive(archive))
    assert parsed.entries == archive.entries


def test_data_is_aligned():
    data = save_archive(_sample())
    pos = 16
    while pos < len(data):
        size, data_size, data_offset, _, _ = struct.unpack_from("<5I", data, pos)
        assert (pos + data_offset) % 16 == 0
        assert size == data_offset + data_size
        pos += size
    assert pos == len(data)


def test_add_or_replace_keeps_position():
    archive = _sample()
    archive.add_or_replace("a.dds", b"replaced")
    assert len(archive) == 3
    assert archive[0] == ArchiveEntry("a.dds", b"replaced")
    assert archive.find("empty.bin").data == b""
    assert archive.find("missing") is None


def test_parse_rejects_short_data():
    with pytest.raises(ValueError):
        parse_archive(b"\x00\x00")


def test_parse_rejects_truncated_entry():
    data = save_archive(_sample())
    with pytest.raises(ValueError):
        parse_archive(data[:-3])


def test_load_single(tmp_path):
    path = tmp_path / "stage.ar"
    path.write_bytes(save_archive(_sample()))
    assert split_archive_paths(path) == [str(path)]
    assert load_archive(path).entries == _sample().entries


def _write_splits(tmp_path, count):
    for index in range(count):
        archive = Archive()
        archive.add_or_replace(f"file{index}.bin", bytes([index]) * 4)
        (tmp_path / f"stage.ar.{index:02d}").write_bytes(save_archive(archive))


def test_load_split_without_list(tmp_path):
    _write_splits(tmp_path, 3)
    archive = load_archive(tmp_path / "stage.ar.00")
    assert [e.name for e in archive] == ["file0.bin", "file1.bin", "file2.bin"]


def test_split_count_from_list(tmp_path):
    _write_splits(tmp_path, 3)
    (tmp_path / "stage.arl").write_bytes(b"ARL2" + struct.pack("<I", 2))
    paths = split_archive_paths(tmp_path / "stage.ar.00")
    assert [p[-2:] for p in paths] == ["00", "01"]
    assert len(load_archive(tmp_path / "stage.ar.00")) == 2


def test_list_with_bad_signature_is_ignored(tmp_path):
    _write_splits(tmp_path, 2)
    (tmp_path / "stage.arl").write_bytes(b"NOPE" + struct.pack("<I", 1))
    assert len(split_archive_paths(tmp_path / "stage.ar.00")) == 2


def test_missing_single_archive_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_archive(tmp_path / "none.ar")