import logging

from hedgegi.stage_files import clean_output_directory, validate_output_directory


def test_validate_creates_directory(tmp_path):
    target = tmp_path / "stage-HedgeGI"
    assert validate_output_directory(target, True) is True
    assert target.is_dir()


def test_validate_existing_without_create(tmp_path):
    assert validate_output_directory(tmp_path, False) is True


def test_validate_missing_logs_error(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert validate_output_directory(tmp_path / "missing", False) is False
    assert "Unable to locate output directory path" in caplog.text


def test_validate_cannot_create_nested(tmp_path):
    target = tmp_path / "a" / "b"
    assert validate_output_directory(target, True) is False
    assert not target.exists()


def test_clean_removes_only_output_files(tmp_path):
    for name in ("a.png", "b.DDS", "c.lft", "d.shlf", "e.mti", "keep.txt", "keep.ar"):
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "sub.png").mkdir()

    removed = clean_output_directory(tmp_path)

    assert sorted(removed) == ["a.png", "b.DDS", "c.lft", "d.shlf", "e.mti"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.ar", "keep.txt", "sub.png"]


def test_clean_missing_directory(tmp_path):
    assert clean_output_directory(tmp_path / "missing") == []