import pytest

from artyengine.file_manager import create_folder, read_file, write_file


def test_create_folder_creates_once(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert create_folder("SaveGame") is True
    assert (tmp_path / "SaveGame").is_dir()
    assert create_folder("SaveGame") is False


def test_create_nested_folder_in_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert create_folder("SaveGame")
    assert create_folder("SaveGame/ProcessedImage")
    assert (tmp_path / "SaveGame" / "ProcessedImage").is_dir()


def test_create_folder_without_parent_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        create_folder("missing/child")


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "notes.txt"
    text = "first line\nsecond line\n"
    write_file(target, text)
    assert read_file(target) == text


def test_write_replaces_previous_contents(tmp_path):
    target = tmp_path / "notes.txt"
    write_file(target, "old contents")
    write_file(target, "new")
    assert read_file(str(target)) == "new"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.txt")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_file(tmp_path / "absent" / "file.txt", "text")