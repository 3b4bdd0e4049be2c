import pytest

from libmykit import files


def test_create_then_read_round_trip(tmp_path):
    target = tmp_path / "out.txt"
    with files.create_file(target, 0o644) as handle:
        handle.write("hello\nworld\n".encode())
    assert files.read_file(target) == "hello\nworld\n"


def test_create_truncates_existing(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content")
    with files.create_file(target, 0o644):
        pass
    assert files.read_file(target) == ""
    assert files.file_size(target) == 0


def test_file_size_matches_content(tmp_path):
    target = tmp_path / "data.bin"
    payload = b"abcdef" * 7
    target.write_bytes(payload)
    assert files.file_size(target) == len(payload)


def test_open_file_reads_bytes(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"xyz")
    with files.open_file(target) as handle:
        assert handle.read() == b"xyz"


def test_open_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.open_file(tmp_path / "missing")


def test_read_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.read_file(tmp_path / "missing")


def test_size_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.file_size(tmp_path / "missing")


def test_create_in_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.create_file(tmp_path / "nope" / "file.txt", 0o644)