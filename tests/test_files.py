import pytest

from gochanlab.files import files_demo, read_head, write_bytes, write_text


def test_bytes_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = b"\x00\x01binary"
    assert write_bytes(path, payload) == len(payload)
    assert read_head(path, 100) == payload


def test_text_round_trip_counts_bytes(tmp_path):
    path = tmp_path / "text.txt"
    text = "na\u00efve\n"
    assert write_text(path, text) == len(text.encode("utf-8"))
    assert read_head(path, 100).decode("utf-8") == text


def test_write_truncates_existing_file(tmp_path):
    path = tmp_path / "f.txt"
    write_text(path, "a long first version")
    write_text(path, "short")
    assert path.read_text() == "short"


def test_read_head_is_limited_to_size(tmp_path):
    path = tmp_path / "long.txt"
    payload = b"x" * 50
    write_bytes(path, payload)
    assert read_head(path, 20) == payload[:20]


def test_read_head_of_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    write_bytes(path, b"")
    with pytest.raises(EOFError):
        read_head(path)


def test_read_head_of_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_head(tmp_path / "missing.txt")


def test_files_demo_writes_both_files(tmp_path, capsys):
    assert files_demo(tmp_path) == b"Hello, world!\n"
    assert (tmp_path / "writeString.txt").read_text() == "Hello, Go!\n"
    out = capsys.readouterr().out
    assert "Data written successfully" in out
    assert "String written successfully" in out